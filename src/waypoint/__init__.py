"""Waypoint - deep-link resolution and per-tab navigation state."""

from .errors import EmptyRoute, MalformedInput, NavigationError, NoResolvableTargets
from .navigation import NavigationStack
from .resolution import TargetFactory, previous_token, resolve_targets, resolve_url
from .router import ROOT, RootKey, Router, SimpleRouter
from .rules import RouteTable
from .url import build_url, decompose_url

__all__ = [
    "ROOT",
    "EmptyRoute",
    "MalformedInput",
    "NavigationError",
    "NavigationStack",
    "NoResolvableTargets",
    "RootKey",
    "RouteTable",
    "Router",
    "SimpleRouter",
    "TargetFactory",
    "build_url",
    "decompose_url",
    "previous_token",
    "resolve_targets",
    "resolve_url",
]
