from typing import Iterable, Optional

from satwords.cli.study_ui import start_study_flow
from satwords.gestures import GestureClassifier
from satwords.models import Card
from satwords.study_session import StudySession


def study_logic(cards: Optional[Iterable[Card]] = None):
    """
    Set up and start an interactive study session.

    Creates a swipe classifier and a study session over the given cards
    (the built-in deck when omitted), then launches the interactive flow.

    Parameters:
        cards (Optional[Iterable[Card]]): Cards to study.

    Raises:
        EmptyDeckError: If `cards` is empty.
    """
    classifier = GestureClassifier()

    session = StudySession(cards=cards, classifier=classifier)

    start_study_flow(session)
