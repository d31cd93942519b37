"""Exceptions raised while turning a deep link into navigation targets.

The URL decomposer and resolution pipeline raise these. ``Router.navigate``
catches them at its boundary and reports a plain boolean instead.
"""


class NavigationError(Exception):
    """Base for all deep-link resolution failures."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class MalformedInput(NavigationError):
    """The string cannot be parsed as a URL at all."""


class EmptyRoute(NavigationError):
    """The URL parsed, but has no host to route on."""


class NoResolvableTargets(NavigationError):
    """Every token was unmatched or purely structural."""
