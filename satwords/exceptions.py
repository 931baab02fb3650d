from typing import Optional


class DeckError(Exception):
    """Base exception for deck-related errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class EmptyDeckError(DeckError):
    """Raised when a deck is constructed without any cards."""

    pass
