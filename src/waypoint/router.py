"""Navigation state: per-tab stacks, the selected tab, and one overlay.

A router owns every stack for one navigation root. Create one instance per
window or scene; nothing here is shared at module level.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, Hashable, Iterable, TypeVar

from .errors import NavigationError
from .navigation import NavigationStack
from .resolution import TargetFactory, resolve_url

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
S = TypeVar("S")


class RootKey(Enum):
    """Implicit key of a single-stack router."""

    ROOT = "root"


ROOT = RootKey.ROOT


class Router(Generic[K, T, S]):
    """Tab-based navigation router.

    Each tab has its own stack of targets. Operations that take an optional
    ``key`` act on the selected tab when it is omitted. The overlay slot
    holds at most one presented value and is shared by all tabs.

    Rendering layers observe changes with ``subscribe``; callbacks run
    synchronously after each mutation.
    """

    def __init__(self, initial_tab: K, factory: TargetFactory[T] | None = None) -> None:
        self.factory = factory
        self._active_key = initial_tab
        self._overlay: S | None = None
        self._stacks: dict[K, NavigationStack[T]] = {}
        self._listeners: list[Callable[[], None]] = []

    # Observation

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a change callback.

        Callbacks run after the state has changed. An exception raised by a
        callback propagates to the caller of the mutating operation; the
        change itself is not rolled back.

        Returns:
            A function that removes the callback again
        """
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    # Tabs

    @property
    def active_key(self) -> K:
        """The currently selected tab."""
        return self._active_key

    @active_key.setter
    def active_key(self, tab: K) -> None:
        self.select(tab)

    def select(self, tab: K) -> None:
        """Switch the selected tab. Stack contents are untouched."""
        if tab == self._active_key:
            return
        self._active_key = tab
        self._notify()

    @property
    def tabs(self) -> list[K]:
        """All known tabs: every member of an Enum tab type, else tabs seen so far."""
        if isinstance(self._active_key, Enum):
            return list(type(self._active_key))
        seen = list(self._stacks)
        if self._active_key not in self._stacks:
            seen.append(self._active_key)
        return seen

    # Stacks

    def _resolve_key(self, key: K | None) -> K:
        return self._active_key if key is None else key

    def _stack(self, key: K) -> NavigationStack[T]:
        stack = self._stacks.get(key)
        if stack is None:
            stack = self._stacks[key] = NavigationStack()
        return stack

    def read(self, key: K | None = None) -> list[T]:
        """Return a copy of the stack for ``key``, or [] if never written."""
        return self[self._resolve_key(key)]

    @property
    def active_path(self) -> list[T]:
        """The stack of the selected tab."""
        return self.read()

    def __getitem__(self, key: K) -> list[T]:
        stack = self._stacks.get(key)
        return stack.items() if stack is not None else []

    def __setitem__(self, key: K, targets: Iterable[T]) -> None:
        self._stack(key).replace(targets)
        self._notify()

    def push(self, target: T, key: K | None = None) -> None:
        """Navigate to ``target`` by appending it to the stack."""
        self._stack(self._resolve_key(key)).push(target)
        self._notify()

    def pop_last(self, key: K | None = None) -> None:
        """Go back one screen. Does nothing on an empty stack."""
        stack = self._stacks.get(self._resolve_key(key))
        if stack is None or stack.is_empty():
            return
        stack.pop()
        self._notify()

    def clear_to_root(self, key: K | None = None) -> None:
        """Pop the stack back to its root. Does nothing on an empty stack."""
        stack = self._stacks.get(self._resolve_key(key))
        if stack is None or stack.is_empty():
            return
        stack.clear()
        self._notify()

    def replace(self, targets: Iterable[T], key: K | None = None) -> None:
        """Overwrite the stack with ``targets``."""
        self[self._resolve_key(key)] = targets

    # Overlay

    @property
    def overlay(self) -> S | None:
        """The currently presented overlay, if any."""
        return self._overlay

    def present_overlay(self, value: S) -> None:
        """Present ``value``, replacing any overlay already shown."""
        self._overlay = value
        self._notify()

    def dismiss_overlay(self) -> None:
        """Dismiss the current overlay."""
        if self._overlay is None:
            return
        self._overlay = None
        self._notify()

    # Deep links

    def navigate(self, url: str) -> bool:
        """Replace the selected tab's stack with the targets ``url`` resolves to.

        Returns:
            True on success. On failure the router state is unchanged.
        """
        if self.factory is None:
            raise RuntimeError("Router has no target factory; pass factory= to resolve deep links")

        try:
            targets = resolve_url(url, self.factory)
        except NavigationError as e:
            logger.warning("Deep link rejected: %s", e)
            return False

        self.replace(targets)
        logger.debug("Navigated %s to %s", self._active_key, url)
        return True


class SimpleRouter(Router[RootKey, T, S]):
    """Single-stack router for apps without tabs."""

    def __init__(self, factory: TargetFactory[T] | None = None) -> None:
        super().__init__(ROOT, factory)

    @property
    def path(self) -> list[T]:
        """The navigation path."""
        return self.read()

    @path.setter
    def path(self, targets: Iterable[T]) -> None:
        self.replace(targets)

    def push(self, target: T) -> None:
        super().push(target)

    def pop_last(self) -> None:
        super().pop_last()

    def clear_to_root(self) -> None:
        super().clear_to_root()

    def replace(self, targets: Iterable[T]) -> None:
        super().replace(targets)

    def read(self) -> list[T]:
        return super().read()
