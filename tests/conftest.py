import logging
from typing import Tuple

import pytest

from satwords.deck import DeckState
from satwords.gestures import GestureClassifier
from satwords.models import Card
from satwords.study_session import StudySession


# --- Card Fixtures ---
@pytest.fixture
def sample_cards() -> Tuple[Card, ...]:
    """
    Provide a small, ordered deck of three cards.

    Returns:
        Tuple[Card, ...]: Cards "Alpha", "Beta" and "Gamma" with matching definitions.
    """
    return (
        Card(term="Alpha", definition="First letter"),
        Card(term="Beta", definition="Second letter"),
        Card(term="Gamma", definition="Third letter"),
    )


@pytest.fixture
def deck_state(sample_cards: Tuple[Card, ...]) -> DeckState:
    """Provide a DeckState over `sample_cards`, positioned on the first card."""
    return DeckState(sample_cards)


@pytest.fixture
def classifier() -> GestureClassifier:
    """Provide a GestureClassifier with the default threshold."""
    return GestureClassifier()


@pytest.fixture
def session(sample_cards: Tuple[Card, ...]) -> StudySession:
    """Provide a StudySession over `sample_cards`."""
    return StudySession(cards=sample_cards)


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture satwords log records at DEBUG level."""
    caplog.set_level(logging.DEBUG, logger="satwords")
    return caplog
