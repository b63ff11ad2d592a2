"""Authenticated router: route table, resolver, controller and helpers."""

from .auth import AuthStateProbe, CallableAuthProbe, StaticAuthProbe, take_snapshot
from .builtin import ROUTE_MAP, ROUTES, build_route_table
from .controller import ControllerState, NavigationController
from .events import NavigationEvent, NavigationOperation, log_navigation_event
from .helpers import NavigationHelpers
from .requests import (
    Allow,
    DecisionKind,
    NavigationOrigin,
    NavigationRequest,
    NotFound,
    RedirectToHome,
    RedirectToLogin,
    ResolutionDecision,
)
from .resolver import RouteResolver
from .stack import Frame, NavigationStack
from .table import RouteDefinition, RouteTable, check_parameters

__all__ = [
    "Allow",
    "AuthStateProbe",
    "CallableAuthProbe",
    "ControllerState",
    "DecisionKind",
    "Frame",
    "NavigationController",
    "NavigationEvent",
    "NavigationHelpers",
    "NavigationOperation",
    "NavigationOrigin",
    "NavigationRequest",
    "NavigationStack",
    "NotFound",
    "ROUTES",
    "ROUTE_MAP",
    "RedirectToHome",
    "RedirectToLogin",
    "ResolutionDecision",
    "RouteDefinition",
    "RouteResolver",
    "RouteTable",
    "StaticAuthProbe",
    "build_route_table",
    "check_parameters",
    "log_navigation_event",
    "take_snapshot",
]
