"""Main Textual application for Waypoint."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Input, OptionList, Static, Tabs
from textual.widgets import Tab as TabWidget

from .actions import NavigationActionsMixin, SheetActionsMixin
from .config import Config
from .demo import Destination, Sheet, Tab, describe, link_for, routes
from .router import Router
from .widgets import SheetModal, StackView


class WaypointApp(NavigationActionsMixin, SheetActionsMixin, App):
    """Waypoint - Deep Link Navigator TUI."""

    TITLE = "Waypoint"
    SUB_TITLE = "Deep Link Navigator"

    CSS = """
    #main-container {
        width: 100%;
        height: 1fr;
    }

    #stack-view {
        width: 60%;
        height: 100%;
        border: solid $accent;
    }

    #bookmarks {
        width: 40%;
        height: 100%;
        border: solid $warning;
    }

    #bookmarks:focus-within {
        border: solid yellow;
    }

    #status {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "go_back", "Back"),
        Binding("r", "go_root", "Root"),
        Binding("1", "select_tab('home')", "Home", show=False),
        Binding("2", "select_tab('profile')", "Profile", show=False),
        Binding("3", "select_tab('settings')", "Settings", show=False),
        Binding("c", "present_sheet('compose')", "Compose"),
        Binding("h", "present_sheet('help')", "Help"),
        Binding("x", "dismiss_sheet", "Dismiss", show=False),
    ]

    def __init__(
        self,
        config: Config,
        router: Router[Tab, Destination, Sheet] | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.router = router or Router(Tab.from_name(config.initial_tab), factory=routes)
        self._sheet_modal: SheetModal | None = None
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Tabs(
            *(TabWidget(f"{tab.icon} {tab.value.title()}", id=tab.value) for tab in Tab),
            active=self.router.active_key.value,
            id="tabs",
        )
        with Horizontal(id="main-container"):
            yield StackView(id="stack-view")
            yield OptionList(*self.config.bookmarks.links, id="bookmarks")
        yield Static(id="status")
        yield Input(placeholder=f"{self.config.scheme}://list/detail?id=1", id="link-input")
        yield Footer()

    def on_mount(self) -> None:
        """Bind the view to the router."""
        self._unsubscribe = self.router.subscribe(self._refresh_view)
        self._refresh_view()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _main_screen(self):
        """The default screen, which stays below any sheet modal."""
        return self.screen_stack[0]

    def _refresh_view(self) -> None:
        """Re-render from the router state."""
        path = self.router.active_path
        tab = self.router.active_key

        self._main_screen().query_one("#stack-view", StackView).update_path(
            [describe(destination) for destination in path],
            tab.value.title(),
        )

        status = self._main_screen().query_one("#status", Static)
        if path:
            status.update(f"Link: {link_for(path[-1], self.config.scheme)}")
        else:
            status.update("Link: (root)")

        self._sync_sheet()


def run_app(config: Config) -> None:
    """Run the Waypoint application."""
    app = WaypointApp(config)
    app.run()
