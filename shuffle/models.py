"""Value types shared by the card stack manager and its front ends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional, Tuple


class SwipeDirection(Enum):
    """Default set of directions a card can leave the stack in."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "SwipeDirection":
        """Direction an undone card re-enters from when animating back."""
        return _OPPOSITES[self]


_OPPOSITES = {
    SwipeDirection.LEFT: SwipeDirection.RIGHT,
    SwipeDirection.RIGHT: SwipeDirection.LEFT,
    SwipeDirection.UP: SwipeDirection.DOWN,
    SwipeDirection.DOWN: SwipeDirection.UP,
}


@dataclass(frozen=True, slots=True)
class Swipe:
    """A resolved card: its data source index and how it left the stack.

    ``direction`` is stored untouched; any hashable token works, although
    :class:`SwipeDirection` is what the bundled controller expects.
    """

    index: int
    direction: Hashable


@dataclass(frozen=True, slots=True)
class StackSnapshot:
    """Immutable view of a manager's state at one point in time."""

    remaining: Tuple[int, ...]
    swipes: Tuple[Swipe, ...]

    @property
    def total_index_count(self) -> int:
        return len(self.remaining) + len(self.swipes)

    @property
    def top_index(self) -> Optional[int]:
        return self.remaining[0] if self.remaining else None
