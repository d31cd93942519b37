"""Stack primitive backing each navigation path."""

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class NavigationStack(Generic[T]):
    """Ordered navigation path; the last item is the visible screen."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._stack: list[T] = list(items)

    def push(self, item: T) -> None:
        """Push an item onto the navigation stack."""
        self._stack.append(item)

    def pop(self) -> T | None:
        """Pop and return the most recent item, or None if empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def clear(self) -> None:
        """Return to the root by removing every item."""
        self._stack.clear()

    def replace(self, items: Iterable[T]) -> None:
        """Overwrite the whole stack with ``items``."""
        self._stack = list(items)

    def items(self) -> list[T]:
        """Return a copy of the stack contents, root first."""
        return list(self._stack)

    def is_empty(self) -> bool:
        """Check if the navigation stack is empty."""
        return len(self._stack) == 0

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items())
