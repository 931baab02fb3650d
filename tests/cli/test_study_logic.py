from unittest.mock import patch

import pytest

from satwords.cli._study_logic import study_logic
from satwords.exceptions import EmptyDeckError


def test_study_logic_direct_call():
    """Tests the study logic wiring by calling it directly."""
    with (
        patch("satwords.cli._study_logic.GestureClassifier") as mock_classifier,
        patch("satwords.cli._study_logic.StudySession") as mock_session,
        patch("satwords.cli._study_logic.start_study_flow") as mock_start_flow,
    ):
        study_logic()

        mock_classifier.assert_called_once_with()
        mock_session.assert_called_once_with(
            cards=None, classifier=mock_classifier.return_value
        )
        mock_start_flow.assert_called_once_with(mock_session.return_value)


def test_study_logic_passes_cards(sample_cards):
    with patch("satwords.cli._study_logic.start_study_flow") as mock_start_flow:
        study_logic(cards=sample_cards)

    session = mock_start_flow.call_args.args[0]
    assert session.deck.cards == sample_cards


def test_study_logic_empty_deck():
    with patch("satwords.cli._study_logic.start_study_flow") as mock_start_flow:
        with pytest.raises(EmptyDeckError):
            study_logic(cards=[])
    mock_start_flow.assert_not_called()
