"""Modal screen showing the presented sheet."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static

SHEET_TEXT = {
    "compose": "Write something...",
    "help": (
        "Type a deep link below and press Enter, or pick a bookmark.\n"
        "escape: back  r: root  1-3: tabs  c/h: sheets  x: dismiss"
    ),
}


class SheetModal(ModalScreen):
    """Modal screen for a single presented sheet."""

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
        Binding("x", "close", "Close", show=False),
    ]

    CSS = """
    SheetModal {
        align: center middle;
    }

    #sheet-container {
        width: 60;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #sheet-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def __init__(self, sheet: str) -> None:
        super().__init__()
        self.sheet = sheet

    def compose(self) -> ComposeResult:
        with Vertical(id="sheet-container"):
            yield Label(self.sheet.title(), id="sheet-title")
            yield Static(SHEET_TEXT.get(self.sheet, ""), id="sheet-body")

    def action_close(self) -> None:
        """Close the sheet."""
        self.dismiss(None)
