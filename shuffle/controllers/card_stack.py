"""Qt-facing controller for card stack state.

:class:`CardStackController` sits between a PySide6 card stack view and the
framework-free :class:`~shuffle.managers.CardStackStateManager`. Views call
the controller in response to gestures or commands and listen to its signals
to know which card to animate; the manager itself never calls back into the
view. Signals fire only when the state actually changed, so no-op swipes or
undos are invisible to listeners.
"""

from __future__ import annotations

import logging
from typing import Hashable, List, Optional

from PySide6.QtCore import QObject, Signal

from .. import config
from ..managers import CardStackStateManagable, CardStackStateManager
from ..models import StackSnapshot, Swipe


class CardStackController(QObject):
    """Forward card stack commands to a state manager and announce changes."""

    cardSwiped = Signal(int, object)
    swipeUndone = Signal(int, object)
    cardInserted = Signal(int, int)
    stackShifted = Signal(int)
    stackReset = Signal(int)
    stateChanged = Signal()

    def __init__(
        self,
        manager: Optional[CardStackStateManagable] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._manager = manager if manager is not None else CardStackStateManager()
        self.logger = logging.getLogger(f"{config.LOGGER_NAME}.controller")

    @property
    def manager(self) -> CardStackStateManagable:
        return self._manager

    @property
    def remaining_indices(self) -> List[int]:
        return self._manager.remaining_indices

    @property
    def swipes(self) -> List[Swipe]:
        return self._manager.swipes

    @property
    def total_index_count(self) -> int:
        return self._manager.total_index_count

    @property
    def top_index(self) -> Optional[int]:
        return self._manager.top_index

    def visible_indices(self, count: int = config.DEFAULT_VISIBLE_CARDS) -> List[int]:
        return self._manager.visible_indices(count)

    def snapshot(self) -> StackSnapshot:
        return self._manager.snapshot()

    def reset(self, number_of_cards: int) -> None:
        self._manager.reset(number_of_cards)
        self.logger.info("Card stack reset with %d cards", number_of_cards)
        self.stackReset.emit(number_of_cards)
        self.stateChanged.emit()

    def swipe(self, direction: Hashable) -> Optional[int]:
        """Swipe the top card and return its index, or ``None`` if empty."""

        index = self.top_index
        if index is None:
            return None
        self._manager.swipe(direction)
        self.logger.info("Card %d swiped %s", index, direction)
        self.cardSwiped.emit(index, direction)
        self.stateChanged.emit()
        return index

    def undo_swipe(self) -> Optional[Swipe]:
        swipe = self._manager.undo_swipe()
        if swipe is None:
            return None
        self.logger.info("Undid swipe of card %d", swipe.index)
        self.swipeUndone.emit(swipe.index, swipe.direction)
        self.stateChanged.emit()
        return swipe

    def insert(self, index: int, position: int) -> None:
        self._manager.insert(index, position)
        self.logger.info("Inserted card %d at position %d", index, position)
        self.cardInserted.emit(index, position)
        self.stateChanged.emit()

    def shift(self, distance: int = config.DEFAULT_SHIFT_DISTANCE) -> None:
        count = len(self._manager.remaining_indices)
        if count == 0 or distance % count == 0:
            return
        self._manager.shift(distance)
        self.logger.info("Shifted card stack by %d", distance)
        self.stackShifted.emit(distance)
        self.stateChanged.emit()
