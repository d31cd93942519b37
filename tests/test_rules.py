"""Tests for waypoint.rules module."""

import pytest

from conftest import Detail, ListScreen, PostDetail, UserDetail
from waypoint.errors import NoResolvableTargets
from waypoint.resolution import resolve_url
from waypoint.rules import RouteTable


@pytest.fixture
def table():
    routes = RouteTable()
    routes.marker("users", "posts")
    routes.add("detail", lambda p: UserDetail(p.get("id", "unknown")), after="users")
    routes.add("detail", lambda p: PostDetail(p.get("id", "unknown")), after="posts")
    routes.add("detail", lambda p: Detail(p.get("id", "default")))
    routes.add("list", lambda p: ListScreen())
    return routes


class TestRouteTableMatching:
    def test_contextual_rule_wins(self, table):
        assert table("detail", ["users", "detail"], {"id": "1"}) == UserDetail("1")

    def test_falls_back_to_plain_rule(self, table):
        assert table("detail", ["list", "detail"], {"id": "2"}) == Detail("2")

    def test_first_token_uses_plain_rule(self, table):
        assert table("detail", ["detail"], {}) == Detail("default")

    def test_marker_resolves_to_none(self, table):
        assert table("users", ["users", "detail"], {}) is None

    def test_unknown_token(self, table):
        assert table("invalid", ["invalid"], {}) is None

    def test_contextual_routes(self, table):
        assert resolve_url("app://users/detail?id=123", table) == [UserDetail("123")]
        assert resolve_url("app://posts/detail?id=456", table) == [PostDetail("456")]
        assert resolve_url("app://detail?id=789", table) == [Detail("789")]

    def test_multi_token(self, table):
        assert resolve_url("app://list/detail?id=456", table) == [ListScreen(), Detail("456")]

    def test_only_markers_fail(self, table):
        with pytest.raises(NoResolvableTargets):
            resolve_url("app://users/posts", table)


class TestRouteTableRegistration:
    def test_decorator_returns_function(self):
        routes = RouteTable()

        @routes.route("list")
        def build_list(params):
            return ListScreen()

        assert build_list({}) == ListScreen()
        assert routes("list", ["list"], {}) == ListScreen()

    def test_decorator_with_context(self):
        routes = RouteTable()

        @routes.route("detail", after="users")
        def user_detail(params):
            return UserDetail(params["id"])

        assert routes("detail", ["users", "detail"], {"id": "9"}) == UserDetail("9")
        assert routes("detail", ["detail"], {"id": "9"}) is None

    def test_duplicate_plain_rule(self):
        routes = RouteTable()
        routes.add("list", lambda p: ListScreen())
        with pytest.raises(ValueError):
            routes.add("list", lambda p: ListScreen())

    def test_duplicate_contextual_rule(self):
        routes = RouteTable()
        routes.add("detail", lambda p: Detail("a"), after="users")
        with pytest.raises(ValueError):
            routes.add("detail", lambda p: Detail("b"), after="users")

    def test_same_token_different_context_allowed(self):
        routes = RouteTable()
        routes.add("detail", lambda p: UserDetail("a"), after="users")
        routes.add("detail", lambda p: PostDetail("b"), after="posts")
        routes.add("detail", lambda p: Detail("c"))
        assert routes("detail", ["posts", "detail"], {}) == PostDetail("b")
