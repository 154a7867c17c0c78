# managers/stack_state.py
"""Index bookkeeping for a stack of swipeable cards.

:class:`CardStackStateManager` tracks which data source indices are still in
the stack (front to back, position 0 being the top card) and which have been
swiped, in order, together with their direction. It knows nothing about
rendering; views read its state and call its five mutators.

Benign emptiness (swiping an empty stack, undoing with no history, rotating
an empty stack) is a silent no-op. Arguments that cannot be consistent with
the caller's data source raise :class:`CardStackContractError`, which signals
a bug in the caller and is not meant to be handled.
"""

from __future__ import annotations

import logging
from typing import Hashable, List, Optional, Protocol

from .. import config
from ..models import StackSnapshot, Swipe
from ..sequence import shifted

logger = logging.getLogger(f"{config.LOGGER_NAME}.state")


class CardStackContractError(RuntimeError):
    """Raised when a caller passes indices that contradict the stack state."""


def _contract_violation(message: str, *args) -> CardStackContractError:
    logger.critical(message, *args)
    return CardStackContractError(message % args)


class CardStackStateManagable(Protocol):
    """Interface of the stack state that card stack views depend on."""

    @property
    def remaining_indices(self) -> List[int]: ...

    @property
    def swipes(self) -> List[Swipe]: ...

    @property
    def total_index_count(self) -> int: ...

    @property
    def top_index(self) -> Optional[int]: ...

    def visible_indices(self, count: int = config.DEFAULT_VISIBLE_CARDS) -> List[int]: ...

    def snapshot(self) -> StackSnapshot: ...

    def insert(self, index: int, position: int) -> None: ...

    def swipe(self, direction: Hashable) -> None: ...

    def undo_swipe(self) -> Optional[Swipe]: ...

    def shift(self, distance: int = config.DEFAULT_SHIFT_DISTANCE) -> None: ...

    def reset(self, number_of_cards: int) -> None: ...


class CardStackStateManager:
    """Manage the current state of the card stack."""

    def __init__(self) -> None:
        # Mirrors the visual stack order, first element is the top card.
        self._remaining: List[int] = []
        self._swipes: List[Swipe] = []

    @property
    def remaining_indices(self) -> List[int]:
        """Data source indices that have yet to be swiped, top card first."""

        return list(self._remaining)

    @property
    def swipes(self) -> List[Swipe]:
        """Swipe history, oldest first."""

        return list(self._swipes)

    @property
    def total_index_count(self) -> int:
        return len(self._remaining) + len(self._swipes)

    @property
    def top_index(self) -> Optional[int]:
        return self._remaining[0] if self._remaining else None

    def visible_indices(self, count: int = config.DEFAULT_VISIBLE_CARDS) -> List[int]:
        """Return the indices of the top *count* cards."""

        if count < 0:
            raise _contract_violation("Attempt to show %d cards", count)
        return self._remaining[:count]

    def position_of(self, index: int) -> Optional[int]:
        """Return the stack position of *index*, or ``None`` if not remaining."""

        try:
            return self._remaining.index(index)
        except ValueError:
            return None

    def snapshot(self) -> StackSnapshot:
        return StackSnapshot(remaining=tuple(self._remaining), swipes=tuple(self._swipes))

    def insert(self, index: int, position: int) -> None:
        """Insert data source *index* into the stack at *position*.

        Every stored index at or above *index* (swiped ones included) is
        bumped by one so that existing entries keep pointing at the same
        items once the data source has grown.
        """

        if position < 0:
            raise _contract_violation("Attempt to insert card at position %d", position)
        if position > len(self._remaining):
            raise _contract_violation(
                "Attempt to insert card at position %d, but there are only %d "
                "cards remaining in the stack after the update",
                position,
                len(self._remaining) + 1,
            )
        if index < 0:
            raise _contract_violation("Attempt to insert card at data source index %d", index)
        total = self.total_index_count
        if index > total:
            raise _contract_violation(
                "Attempt to insert card at index %d, but there are only %d "
                "cards after the update",
                index,
                total + 1,
            )

        self._remaining = [i + 1 if i >= index else i for i in self._remaining]
        self._swipes = [
            Swipe(s.index + 1, s.direction) if s.index >= index else s
            for s in self._swipes
        ]
        self._remaining.insert(position, index)
        logger.debug("Inserted index %d at position %d", index, position)

    def swipe(self, direction: Hashable) -> None:
        if not self._remaining:
            logger.debug("Swipe ignored: stack is empty")
            return
        swipe = Swipe(self._remaining.pop(0), direction)
        self._swipes.append(swipe)
        logger.debug("Swiped index %d (%s)", swipe.index, direction)

    def undo_swipe(self) -> Optional[Swipe]:
        """Return the most recent swipe to the top of the stack."""

        if not self._swipes:
            logger.debug("Undo ignored: no swipe history")
            return None
        last = self._swipes.pop()
        self._remaining.insert(0, last.index)
        logger.debug("Undid swipe of index %d (%s)", last.index, last.direction)
        return last

    def shift(self, distance: int = config.DEFAULT_SHIFT_DISTANCE) -> None:
        """Rotate the remaining cards, see :func:`shuffle.sequence.shifted`."""

        self._remaining = shifted(self._remaining, distance)
        logger.debug("Shifted stack by %d", distance)

    def reset(self, number_of_cards: int) -> None:
        if number_of_cards < 0:
            raise _contract_violation("Attempt to reset stack with %d cards", number_of_cards)
        self._remaining = list(range(number_of_cards))
        self._swipes = []
        logger.debug("Stack reset with %d cards", number_of_cards)
