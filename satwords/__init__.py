"""SAT Words - A swipeable vocabulary flashcard deck."""

from .models import Card, GestureState, SwipeAction
from .constants import SAT_WORDS, SWIPE_THRESHOLD
from .deck import DeckState, load_builtin_deck
from .exceptions import DeckError, EmptyDeckError
from .gestures import GestureClassifier
from .study_session import StudySession

__all__ = [
    "Card",
    "GestureState",
    "SwipeAction",
    "SAT_WORDS",
    "SWIPE_THRESHOLD",
    "DeckState",
    "load_builtin_deck",
    "DeckError",
    "EmptyDeckError",
    "GestureClassifier",
    "StudySession",
]
