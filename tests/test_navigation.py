"""Tests for waypoint.navigation module."""

from waypoint.navigation import NavigationStack


class TestNavigationStack:
    def test_starts_empty(self):
        stack = NavigationStack()
        assert stack.is_empty()
        assert len(stack) == 0

    def test_push_pop(self):
        stack = NavigationStack()
        stack.push("a")
        stack.push("b")
        assert stack.pop() == "b"
        assert stack.items() == ["a"]

    def test_pop_empty_returns_none(self):
        stack = NavigationStack()
        assert stack.pop() is None
        assert stack.is_empty()

    def test_clear_is_idempotent(self):
        stack = NavigationStack(["a", "b"])
        stack.clear()
        stack.clear()
        assert stack.items() == []

    def test_replace_overwrites(self):
        stack = NavigationStack(["a", "b"])
        stack.replace(["c"])
        assert stack.items() == ["c"]

    def test_items_is_a_copy(self):
        stack = NavigationStack(["a"])
        items = stack.items()
        items.append("b")
        assert stack.items() == ["a"]

    def test_iterates_root_first(self):
        stack = NavigationStack(["a", "b", "c"])
        assert list(stack) == ["a", "b", "c"]
