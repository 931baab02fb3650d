"""
This module defines the StudySession class, the controller a presentation
layer drives. It owns the deck cursor, the swipe classifier and the flip flag,
and maps raw tap and drag events onto deck navigation.
"""

import logging
from typing import Iterable, Optional, Tuple

from .deck import DeckState, load_builtin_deck
from .gestures import GestureClassifier
from .models import Card, SwipeAction

logger = logging.getLogger(__name__)


class StudySession:
    """
    Manages a single-screen study session over a fixed deck.

    This class is responsible for:
    - Holding the deck cursor and exposing the current card.
    - Toggling between the word and its meaning on tap.
    - Feeding drag events to the classifier and applying the resulting swipe.
    """

    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        classifier: Optional[GestureClassifier] = None,
    ):
        """
        Create a session positioned on the first card, showing its word.

        Parameters:
            cards (Optional[Iterable[Card]]): Cards to study; the built-in SAT
                deck is used when omitted.
            classifier (Optional[GestureClassifier]): Swipe classifier; a
                default one is created when omitted.

        Raises:
            EmptyDeckError: If `cards` is empty.
        """
        self.deck = DeckState(load_builtin_deck() if cards is None else cards)
        self.classifier = classifier or GestureClassifier()
        self.is_flipped = False
        logger.info(f"Started study session with {len(self.deck)} cards.")

    def current(self) -> Card:
        return self.deck.current()

    def position(self) -> Tuple[int, int]:
        return self.deck.position()

    def progress_label(self) -> str:
        """Return the one-based "Card i of N" label."""
        index, total = self.deck.position()
        return f"Card {index + 1} of {total}"

    @property
    def drag_offset(self) -> float:
        """Horizontal displacement of the drag in progress."""
        return self.classifier.offset

    def visible_text(self) -> str:
        """Return the side of the current card that is face up."""
        card = self.deck.current()
        return card.definition if self.is_flipped else card.term

    def on_tap(self) -> None:
        """Flip the current card."""
        self.is_flipped = not self.is_flipped

    def on_drag_update(self, dx: float) -> None:
        self.classifier.on_drag_update(dx)

    def on_drag_end(self) -> SwipeAction:
        """
        Finish the current drag gesture and apply the resulting swipe.

        Returns:
            SwipeAction: The classified action; NONE leaves the deck untouched.
        """
        action = self.classifier.on_drag_end()
        if action is SwipeAction.ADVANCE:
            self.next_card()
        elif action is SwipeAction.RETREAT:
            self.previous_card()
        return action

    def next_card(self) -> None:
        self.deck.advance()
        self.is_flipped = False

    def previous_card(self) -> None:
        self.deck.retreat()
        self.is_flipped = False
