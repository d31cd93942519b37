"""Tests for waypoint.router.SimpleRouter."""

from conftest import AppSheet, Detail, ListScreen
from waypoint.router import ROOT


class TestSimpleRouter:
    def test_initial_state(self, simple_router):
        assert simple_router.path == []
        assert simple_router.overlay is None
        assert simple_router.active_key is ROOT
        assert simple_router.tabs == [ROOT]

    def test_push_and_pop(self, simple_router):
        simple_router.push(Detail("test"))
        simple_router.push(ListScreen())
        assert len(simple_router.path) == 2

        simple_router.pop_last()
        simple_router.pop_last()
        assert simple_router.path == []

        # Should handle empty path gracefully
        simple_router.pop_last()
        assert simple_router.path == []

    def test_clear_to_root(self, simple_router):
        simple_router.push(Detail("test"))
        simple_router.push(ListScreen())
        simple_router.clear_to_root()
        assert simple_router.path == []

    def test_path_assignment_replaces(self, simple_router):
        simple_router.push(Detail("a"))
        simple_router.path = [ListScreen()]
        assert simple_router.read() == [ListScreen()]
        assert simple_router[ROOT] == [ListScreen()]

    def test_navigation_and_overlay_independent(self, simple_router):
        simple_router.push(Detail("test"))
        simple_router.present_overlay(AppSheet.SETTINGS)

        simple_router.pop_last()
        assert simple_router.path == []
        assert simple_router.overlay == AppSheet.SETTINGS

        simple_router.dismiss_overlay()
        assert simple_router.overlay is None

    def test_overlay_replacement(self, simple_router):
        simple_router.present_overlay(AppSheet.SETTINGS)
        simple_router.present_overlay(AppSheet.PROFILE)
        assert simple_router.overlay == AppSheet.PROFILE

    def test_navigate_multiple_destinations(self, simple_router):
        assert simple_router.navigate("myapp://list/detail?id=456")
        assert simple_router.path == [ListScreen(), Detail("456")]

    def test_navigate_clears_existing_path(self, simple_router):
        simple_router.push(Detail("existing"))
        simple_router.push(ListScreen())
        assert simple_router.navigate("myapp://detail?id=1")
        assert simple_router.path == [Detail("1")]

    def test_navigate_failures(self, simple_router):
        simple_router.push(Detail("a"))
        for url in ("myapp://invalid", "not a url", "myapp://"):
            assert simple_router.navigate(url) is False
        assert simple_router.path == [Detail("a")]
