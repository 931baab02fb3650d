"""
This module defines DeckState, the cursor over a fixed, ordered deck of cards.
Navigation wraps around at both ends, so the deck behaves as a circular buffer
with a single cursor.
"""

import logging
from typing import Iterable, Tuple

from .constants import SAT_WORDS
from .exceptions import EmptyDeckError
from .models import Card

logger = logging.getLogger(__name__)


def load_builtin_deck() -> Tuple[Card, ...]:
    """
    Build the compiled-in SAT vocabulary deck.

    Returns:
        Tuple[Card, ...]: One Card per (word, meaning) pair, in display order.
    """
    return tuple(
        Card(term=word, definition=meaning) for word, meaning in SAT_WORDS
    )


class DeckState:
    """
    Tracks which card of a fixed deck is currently displayed.

    The card sequence is frozen at construction; only `current_index` changes,
    and only through `advance()` and `retreat()`.
    """

    def __init__(self, cards: Iterable[Card]):
        """
        Create a deck cursor positioned on the first card.

        Parameters:
            cards (Iterable[Card]): The ordered cards of the deck.

        Raises:
            EmptyDeckError: If `cards` yields no cards.
        """
        self._cards: Tuple[Card, ...] = tuple(cards)
        if not self._cards:
            raise EmptyDeckError("Cannot create a deck with no cards.")
        self._current_index = 0
        logger.debug(f"Created deck with {len(self._cards)} cards.")

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def current_index(self) -> int:
        return self._current_index

    def current(self) -> Card:
        """Return the card under the cursor."""
        return self._cards[self._current_index]

    def position(self) -> Tuple[int, int]:
        """
        Return the cursor position for display.

        Returns:
            Tuple[int, int]: (index, total) where `index` is zero-based.
        """
        return self._current_index, len(self._cards)

    def advance(self) -> None:
        """Move to the next card, wrapping from the last card to the first."""
        previous = self._current_index
        if self._current_index < len(self._cards) - 1:
            self._current_index += 1
        else:
            self._current_index = 0
        logger.debug(f"Advanced from card {previous} to {self._current_index}.")

    def retreat(self) -> None:
        """Move to the previous card, wrapping from the first card to the last."""
        previous = self._current_index
        if self._current_index > 0:
            self._current_index -= 1
        else:
            self._current_index = len(self._cards) - 1
        logger.debug(f"Retreated from card {previous} to {self._current_index}.")
