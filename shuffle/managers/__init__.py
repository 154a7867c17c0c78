"""State managers backing the card stack."""

from .stack_state import (
    CardStackContractError,
    CardStackStateManagable,
    CardStackStateManager,
)

__all__ = [
    "CardStackContractError",
    "CardStackStateManagable",
    "CardStackStateManager",
]
