"""
Data models for the SAT words study deck.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class SwipeAction(IntEnum):
    """
    Outcome of a finished drag gesture.

    The value is the signed step the action applies to the deck cursor.
    """

    RETREAT = -1
    NONE = 0
    ADVANCE = 1


class Card(BaseModel):
    """
    A single vocabulary flashcard: a word on the front, its meaning on the back.

    Cards are immutable once constructed.
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", str_strip_whitespace=True
    )

    term: str = Field(
        ...,
        min_length=1,
        description="The vocabulary word shown on the front of the card.",
    )
    definition: str = Field(
        ...,
        min_length=1,
        description="The meaning shown when the card is flipped.",
    )


class GestureState(BaseModel):
    """
    Transient horizontal drag state for a single gesture.

    Both offsets are zero between gestures.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    accumulated_offset: float = Field(
        default=0.0,
        description="Current horizontal displacement of the card.",
    )
    base_offset: float = Field(
        default=0.0,
        description="Displacement captured when the gesture started.",
    )

    def reset(self) -> None:
        """Zero both offsets at a gesture boundary."""
        self.accumulated_offset = 0.0
        self.base_offset = 0.0

    @property
    def is_idle(self) -> bool:
        """Check if no gesture is in progress."""
        return self.accumulated_offset == 0.0 and self.base_offset == 0.0
