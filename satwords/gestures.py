"""
Swipe detection for horizontal drag gestures.

A gesture is a stream of `on_drag_update` calls followed by one `on_drag_end`.
Only the final accumulated offset matters: past the threshold to the left is
an advance, past it to the right is a retreat, anything else is no action.
"""

import logging

from .constants import SWIPE_THRESHOLD
from .models import GestureState, SwipeAction

logger = logging.getLogger(__name__)


class GestureClassifier:
    """Turns drag updates plus a drag end into at most one SwipeAction."""

    def __init__(self, threshold: float = SWIPE_THRESHOLD):
        self.threshold = threshold
        self.state = GestureState()

    @property
    def offset(self) -> float:
        """Current horizontal displacement, for the visual layer."""
        return self.state.accumulated_offset

    def classify(self, offset: float) -> SwipeAction:
        """
        Classify a final horizontal offset.

        Both bounds are exclusive: an offset of exactly +/- threshold is NONE.

        Parameters:
            offset (float): Accumulated horizontal displacement at gesture end.

        Returns:
            SwipeAction: ADVANCE for a left swipe, RETREAT for a right swipe,
            NONE otherwise.
        """
        if offset < -self.threshold:
            return SwipeAction.ADVANCE
        if offset > self.threshold:
            return SwipeAction.RETREAT
        return SwipeAction.NONE

    def on_drag_update(self, dx: float) -> None:
        """
        Record an intermediate drag position.

        Parameters:
            dx (float): Horizontal displacement relative to the gesture start.
        """
        # Offsets are zeroed at every drag end, so the captured base is always 0.
        if self.state.is_idle:
            self.state.base_offset = self.state.accumulated_offset
        self.state.accumulated_offset = dx + self.state.base_offset

    def on_drag_end(self) -> SwipeAction:
        """
        Classify the finished gesture and reset the drag state.

        Returns:
            SwipeAction: The classification of the final accumulated offset.
        """
        action = self.classify(self.state.accumulated_offset)
        logger.debug(
            f"Drag ended at offset {self.state.accumulated_offset}: "
            f"{action.name}"
        )
        self.state.reset()
        return action
