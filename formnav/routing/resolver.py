"""Route resolution: turns a navigation request into a decision."""

from __future__ import annotations

from typing import Optional

from .auth import AuthStateProbe, take_snapshot
from .requests import (
    Allow,
    NavigationRequest,
    NotFound,
    RedirectToHome,
    RedirectToLogin,
    ResolutionDecision,
)
from .table import RouteTable


class RouteResolver:
    """Computes navigation decisions without touching the navigation stack.

    ``decide`` is a pure function of the request, the table and an auth
    snapshot. ``resolve`` takes a fresh snapshot from the probe first,
    and only when the outcome depends on it.
    """

    def __init__(
        self,
        table: RouteTable,
        probe: AuthStateProbe,
        *,
        login_route: str,
        probe_timeout: Optional[float] = None,
    ) -> None:
        self.table = table
        self.probe = probe
        self.login_route = login_route
        self.probe_timeout = probe_timeout

    def needs_auth_snapshot(self, request: NavigationRequest) -> bool:
        definition = self.table.get(request.target_route_name)
        if definition is None:
            return False
        return definition.requires_auth or definition.name == self.login_route

    def decide(self, request: NavigationRequest, authenticated: bool) -> ResolutionDecision:
        definition = self.table.get(request.target_route_name) if request.target_route_name else None
        if definition is None:
            return NotFound(request.target_route_name)

        if definition.name == self.login_route and authenticated:
            return RedirectToHome()

        if not definition.requires_auth or authenticated:
            return Allow(definition.name, request.parameters)

        return RedirectToLogin(request)

    async def resolve(self, request: NavigationRequest) -> ResolutionDecision:
        authenticated = False
        if self.needs_auth_snapshot(request):
            authenticated = await take_snapshot(self.probe, timeout=self.probe_timeout)
        return self.decide(request, authenticated)
