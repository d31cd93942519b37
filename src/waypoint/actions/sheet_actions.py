"""Sheet presentation action handlers for WaypointApp."""

from __future__ import annotations

from ..demo import Sheet
from ..widgets import SheetModal


class SheetActionsMixin:
    """Mixin keeping the modal sheet in sync with the router overlay."""

    def action_present_sheet(self, name: str) -> None:
        """Present a sheet by name, replacing any sheet already shown."""
        self.router.present_overlay(Sheet(name))

    def action_dismiss_sheet(self) -> None:
        """Dismiss the presented sheet."""
        self.router.dismiss_overlay()

    def _sync_sheet(self) -> None:
        """Show, swap or hide the sheet modal to match the overlay slot."""
        overlay = self.router.overlay
        modal = self._sheet_modal

        if modal is not None and (overlay is None or modal.sheet != overlay.value):
            # Popping directly skips the dismiss callback
            self._sheet_modal = None
            if self.screen is modal:
                self.pop_screen()

        if overlay is not None and self._sheet_modal is None:
            self._sheet_modal = SheetModal(overlay.value)
            self.push_screen(self._sheet_modal, self._on_sheet_dismissed)

    def _on_sheet_dismissed(self, result) -> None:
        """Clear the overlay when the modal closes itself."""
        self._sheet_modal = None
        self.router.dismiss_overlay()
