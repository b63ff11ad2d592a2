"""Navigation error taxonomy and user-facing error mapping."""

from dataclasses import dataclass
from typing import Any


class NavigationError(Exception):
    """Base class for router errors."""


class DuplicateRouteError(NavigationError):
    """Raised when a route name is registered twice."""

    def __init__(self, name: str):
        super().__init__(f"Route '{name}' is already registered")
        self.name = name


class RouteNotFoundError(NavigationError):
    """Raised when a route name is not present in the route table."""

    def __init__(self, name: str):
        super().__init__(f"Route '{name}' is not registered")
        self.name = name


class AuthProbeUnavailable(NavigationError):
    """Raised by an auth probe that cannot determine session state."""


class NavigationClosedError(NavigationError):
    """Raised when a navigation operation is issued after teardown."""


@dataclass(frozen=True)
class ErrorMapping:
    """Normalized user-facing error payload for error screens and logs."""

    code: str
    message: str
    hint: str = ""
    fatal: bool = False


def map_navigation_error(error: Any) -> ErrorMapping:
    """Map raw router exceptions into stable user-facing error semantics."""
    if isinstance(error, DuplicateRouteError):
        return ErrorMapping(
            code="duplicate_route",
            message=f"Route '{error.name}' is defined more than once.",
            hint="Give every route definition a unique name.",
            fatal=True,
        )

    if isinstance(error, RouteNotFoundError):
        if not error.name:
            message = "No destination was given for this navigation."
        else:
            message = f"There is no screen named '{error.name}'."
        return ErrorMapping(
            code="route_not_found",
            message=message,
            hint="Go back or return to the home screen.",
        )

    if isinstance(error, AuthProbeUnavailable):
        return ErrorMapping(
            code="session_unavailable",
            message="Your session could not be verified.",
            hint="Sign in again to continue.",
        )

    if isinstance(error, NavigationClosedError):
        return ErrorMapping(
            code="navigation_closed",
            message="The application is shutting down.",
            fatal=True,
        )

    return ErrorMapping(
        code="internal_error",
        message="Internal navigation error",
        fatal=True,
    )
