"""Configuration loading and defaults for Waypoint."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def get_config_dir() -> Path:
    """Get the waypoint config directory (XDG-style)."""
    return Path.home() / ".config" / "waypoint"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def _default_bookmarks() -> list[str]:
    return [
        "myapp://list",
        "myapp://detail?id=123",
        "myapp://list/detail?id=456",
        "myapp://users/detail?id=user123",
        "myapp://posts/detail?id=post456",
        "myapp://profile?userId=john",
        "myapp://settings",
    ]


@dataclass
class BookmarkConfig:
    """Deep links offered in the demo app."""

    links: list[str] = field(default_factory=_default_bookmarks)


@dataclass
class Config:
    """Application configuration."""

    scheme: str = "myapp"
    initial_tab: str = "home"
    log_file: str = ""  # empty = no file logging
    bookmarks: BookmarkConfig = field(default_factory=BookmarkConfig)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        bookmarks_data = data.get("bookmarks", {})
        bookmarks = BookmarkConfig(
            links=bookmarks_data.get("links", _default_bookmarks()),
        )

        return cls(
            scheme=data.get("scheme", "myapp"),
            initial_tab=data.get("initial_tab", "home"),
            log_file=data.get("log_file", ""),
            bookmarks=bookmarks,
        )

    def get_log_path(self) -> Path | None:
        """Get the expanded log file path, or None when logging is off."""
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser()

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        links_str = ", ".join(f'"{link}"' for link in self.bookmarks.links)
        lines = [
            "# Waypoint Configuration",
            "",
            "# Scheme used when building deep links",
            f'scheme = "{self.scheme}"',
            "",
            "# Tab selected at startup (home, profile, settings)",
            f'initial_tab = "{self.initial_tab}"',
            "",
            "# Write logs to this file; empty disables logging",
            f'log_file = "{self.log_file}"',
            "",
            "# Deep links listed in the app",
            "[bookmarks]",
            f"links = [{links_str}]",
        ]

        config_path.write_text("\n".join(lines) + "\n")
