"""Rotation helper backing :meth:`CardStackStateManager.shift`."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def shifted(items: Sequence[T], distance: int) -> List[T]:
    """Return a copy of *items* rotated by *distance* positions.

    A positive distance moves that many elements from the front to the back
    (``shifted([0, 1, 2, 3], 1) == [1, 2, 3, 0]``); a negative distance moves
    elements from the back to the front (``shifted([0, 1, 2, 3], -1) ==
    [3, 0, 1, 2]``). Distances wrap modulo ``len(items)``.
    """
    if not items:
        return []
    offset = distance % len(items)
    return list(items[offset:]) + list(items[:offset])
