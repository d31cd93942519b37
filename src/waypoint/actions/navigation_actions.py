"""Navigation action handlers for WaypointApp."""

from __future__ import annotations

from textual.widgets import Input, OptionList, Tabs

from ..demo import Tab


class NavigationActionsMixin:
    """Mixin providing stack, tab and deep-link actions."""

    def action_go_back(self) -> None:
        """Pop the selected tab's stack."""
        self.router.pop_last()

    def action_go_root(self) -> None:
        """Pop the selected tab's stack to its root."""
        self.router.clear_to_root()

    def action_select_tab(self, name: str) -> None:
        """Select a tab by name."""
        self._main_screen().query_one("#tabs", Tabs).active = Tab.from_name(name).value

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        """Keep the router's selected tab in sync with the tab bar."""
        if event.tab is not None and event.tab.id:
            self.router.select(Tab.from_name(event.tab.id))

    def open_link(self, text: str) -> bool:
        """Navigate to a deep link, prefixing the configured scheme if missing."""
        link = text.strip()
        if not link:
            return False
        if "://" not in link:
            link = f"{self.config.scheme}://{link}"

        if self.router.navigate(link):
            self.notify(f"Opened {link}")
            return True
        self.notify(f"Cannot open {link}", severity="warning")
        return False

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Open the deep link typed in the link input."""
        if self.open_link(event.value):
            event.input.value = ""

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Open the selected bookmark."""
        links = self.config.bookmarks.links
        if 0 <= event.option_index < len(links):
            self.open_link(links[event.option_index])
