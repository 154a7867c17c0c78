"""Controller layer for binding card stack state to Qt views."""

from .card_stack import CardStackController

__all__ = ["CardStackController"]
