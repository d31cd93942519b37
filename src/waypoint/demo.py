"""Route definitions for the bundled demo app."""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

from .rules import RouteTable
from .url import build_url


class Tab(Enum):
    HOME = "home"
    PROFILE = "profile"
    SETTINGS = "settings"

    @property
    def icon(self) -> str:
        return {"home": "⌂", "profile": "☺", "settings": "⚙"}[self.value]

    @classmethod
    def from_name(cls, name: str) -> "Tab":
        """Look up a tab by value, falling back to the first tab."""
        try:
            return cls(name.lower())
        except ValueError:
            return next(iter(cls))


class Sheet(Enum):
    COMPOSE = "compose"
    HELP = "help"


@dataclass(frozen=True)
class ListScreen:
    pass


@dataclass(frozen=True)
class Detail:
    id: str


@dataclass(frozen=True)
class UserDetail:
    id: str


@dataclass(frozen=True)
class PostDetail:
    id: str


@dataclass(frozen=True)
class Profile:
    user_id: str


@dataclass(frozen=True)
class Settings:
    pass


Destination = Union[ListScreen, Detail, UserDetail, PostDetail, Profile, Settings]

routes: RouteTable[Destination] = RouteTable()
routes.marker("users", "posts")


@routes.route("detail", after="users")
def _user_detail(params: Mapping[str, str]) -> Destination:
    return UserDetail(params.get("id", "unknown"))


@routes.route("detail", after="posts")
def _post_detail(params: Mapping[str, str]) -> Destination:
    return PostDetail(params.get("id", "unknown"))


@routes.route("detail")
def _detail(params: Mapping[str, str]) -> Destination:
    return Detail(params.get("id", "default"))


@routes.route("list")
def _list(params: Mapping[str, str]) -> Destination:
    return ListScreen()


@routes.route("profile")
def _profile(params: Mapping[str, str]) -> Destination:
    return Profile(params.get("userId", "guest"))


@routes.route("settings")
def _settings(params: Mapping[str, str]) -> Destination:
    return Settings()


def describe(destination: Destination) -> str:
    """Human-readable label for a destination."""
    if isinstance(destination, ListScreen):
        return "List"
    if isinstance(destination, Detail):
        return f"Detail #{destination.id}"
    if isinstance(destination, UserDetail):
        return f"User #{destination.id}"
    if isinstance(destination, PostDetail):
        return f"Post #{destination.id}"
    if isinstance(destination, Profile):
        return f"Profile: {destination.user_id}"
    return "Settings"


def link_for(destination: Destination, scheme: str) -> str:
    """Build the deep link that resolves to ``destination`` on its own."""
    if isinstance(destination, ListScreen):
        return build_url(scheme, ["list"])
    if isinstance(destination, Detail):
        return build_url(scheme, ["detail"], {"id": destination.id})
    if isinstance(destination, UserDetail):
        return build_url(scheme, ["users", "detail"], {"id": destination.id})
    if isinstance(destination, PostDetail):
        return build_url(scheme, ["posts", "detail"], {"id": destination.id})
    if isinstance(destination, Profile):
        return build_url(scheme, ["profile"], {"userId": destination.user_id})
    return build_url(scheme, ["settings"])
