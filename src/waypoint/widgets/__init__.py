"""Waypoint widgets."""

from .sheet import SheetModal
from .stack_view import StackView

__all__ = [
    "SheetModal",
    "StackView",
]
