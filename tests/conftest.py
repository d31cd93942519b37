"""Shared fixtures for waypoint tests."""

from dataclasses import dataclass
from enum import Enum

import pytest

from waypoint.resolution import previous_token
from waypoint.router import Router, SimpleRouter


class AppTab(Enum):
    HOME = "home"
    PROFILE = "profile"
    SETTINGS = "settings"


class AppSheet(Enum):
    SETTINGS = "settings"
    PROFILE = "profile"


@dataclass(frozen=True)
class Detail:
    id: str


@dataclass(frozen=True)
class ListScreen:
    pass


@dataclass(frozen=True)
class UserDetail:
    id: str


@dataclass(frozen=True)
class PostDetail:
    id: str


def destination_from(token, tokens, params):
    """Hand-written factory following the contextual tie-break rules."""
    previous = previous_token(token, tokens)

    if (previous, token) == ("users", "detail"):
        return UserDetail(params.get("id", "unknown"))
    if (previous, token) == ("posts", "detail"):
        return PostDetail(params.get("id", "unknown"))
    if token == "list":
        return ListScreen()
    if token == "detail":
        return Detail(params.get("id", "default"))
    return None


@pytest.fixture
def factory():
    return destination_from


@pytest.fixture
def router():
    """Tab router starting on HOME with the contextual factory."""
    return Router(AppTab.HOME, factory=destination_from)


@pytest.fixture
def simple_router():
    return SimpleRouter(factory=destination_from)
