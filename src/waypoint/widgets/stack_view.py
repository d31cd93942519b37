"""Stack view widget listing the selected tab's navigation path."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ListItem, ListView, Static


class StackItem(ListItem):
    """A list item representing one screen on the stack."""

    def __init__(self, depth: int, label: str) -> None:
        super().__init__()
        self.depth = depth
        self.label = label

    def compose(self) -> ComposeResult:
        yield Label(f"{self.depth}. {self.label}")


class StackView(Vertical):
    """Widget displaying the navigation path, root first."""

    DEFAULT_CSS = """
    StackView {
        width: 1fr;
        height: 1fr;
    }

    StackView > #stack-header {
        background: $primary-background;
        color: $warning;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    StackView > #stack-list-view {
        height: 1fr;
    }

    StackView > #stack-root {
        padding: 1 2;
        color: $text-muted;
    }

    StackView ListItem {
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._labels: list[str] = []

    def compose(self) -> ComposeResult:
        yield Static("PATH", id="stack-header")
        yield Static("Root", id="stack-root")
        yield ListView(id="stack-list-view")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#stack-list-view", ListView)

    @property
    def labels(self) -> list[str]:
        """Labels currently displayed."""
        return list(self._labels)

    def update_path(self, labels: list[str], title: str) -> None:
        """Replace the displayed path.

        Args:
            labels: One label per stacked screen, root first
            title: Name of the tab that owns the path
        """
        self._labels = list(labels)
        self.query_one("#stack-header", Static).update(f"PATH ({title})")
        self.query_one("#stack-root", Static).display = not labels

        list_view = self.list_view
        list_view.clear()
        for depth, label in enumerate(labels, start=1):
            list_view.append(StackItem(depth, label))
