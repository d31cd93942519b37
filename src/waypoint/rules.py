"""Declarative route table usable as a target factory."""

from __future__ import annotations

from typing import Callable, Generic, Mapping, Sequence, TypeVar

from .resolution import previous_token

T = TypeVar("T")

Builder = Callable[[Mapping[str, str]], T]


class RouteTable(Generic[T]):
    """Token rules matched on (previous token, token), then token alone.

    Usage:
        routes = RouteTable()
        routes.marker("users", "posts")

        @routes.route("detail", after="users")
        def user_detail(params):
            return UserDetail(params.get("id", "unknown"))

        @routes.route("detail")
        def detail(params):
            return Detail(params.get("id", "default"))

        router = Router(Tab.HOME, factory=routes)
    """

    def __init__(self) -> None:
        self._contextual: dict[tuple[str, str], Builder[T]] = {}
        self._plain: dict[str, Builder[T]] = {}
        self._markers: set[str] = set()

    def route(self, token: str, after: str | None = None):
        """Decorator registering a builder for ``token``.

        Args:
            token: Token the builder handles
            after: Only match when this token immediately precedes it

        Raises:
            ValueError: If a builder is already registered for the pair
        """

        def decorator(fn: Builder[T]) -> Builder[T]:
            self.add(token, fn, after=after)
            return fn

        return decorator

    def add(self, token: str, builder: Builder[T], after: str | None = None) -> None:
        """Register a builder without the decorator syntax."""
        if after is None:
            if token in self._plain:
                raise ValueError(f"Route already registered for {token!r}")
            self._plain[token] = builder
        else:
            key = (after, token)
            if key in self._contextual:
                raise ValueError(f"Route already registered for {token!r} after {after!r}")
            self._contextual[key] = builder

    def marker(self, *tokens: str) -> None:
        """Declare tokens that only provide context and resolve to nothing."""
        self._markers.update(tokens)

    def __call__(
        self,
        token: str,
        tokens: Sequence[str],
        params: Mapping[str, str],
    ) -> T | None:
        previous = previous_token(token, tokens)
        if previous is not None:
            builder = self._contextual.get((previous, token))
            if builder is not None:
                return builder(params)

        if token in self._markers:
            return None

        builder = self._plain.get(token)
        if builder is None:
            return None
        return builder(params)
