"""Shuffle: state tracking for a stack of swipeable cards."""

from .log import configure_logging
from .managers import (
    CardStackContractError,
    CardStackStateManagable,
    CardStackStateManager,
)
from .models import StackSnapshot, Swipe, SwipeDirection
from .sequence import shifted

__all__ = [
    "CardStackContractError",
    "CardStackStateManagable",
    "CardStackStateManager",
    "StackSnapshot",
    "configure_logging",
    "Swipe",
    "SwipeDirection",
    "shifted",
]
