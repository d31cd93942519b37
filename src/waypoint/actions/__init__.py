"""Action handler mixins for WaypointApp."""

from .navigation_actions import NavigationActionsMixin
from .sheet_actions import SheetActionsMixin

__all__ = [
    "NavigationActionsMixin",
    "SheetActionsMixin",
]
