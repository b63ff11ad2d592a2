"""Sign-in screen. Resumes the interrupted navigation on success."""

from __future__ import annotations

from textual.binding import Binding

from ...routing.builtin import ROUTE_MAP
from ...routing.requests import NavigationRequest
from .base import RouteScreen


class LoginScreen(RouteScreen):
    BINDINGS = [
        Binding("enter", "sign_in", "Sign in"),
    ]

    @property
    def pending_request(self) -> NavigationRequest | None:
        for value in self.route_parameters.values():
            if isinstance(value, NavigationRequest):
                return value
        return None

    def detail_text(self) -> str:
        pending = self.pending_request
        if pending is None:
            return "Press Enter to sign in."
        target = ROUTE_MAP.get(pending.target_route_name)
        label = target.label if target else pending.target_route_name
        return f"Sign in to continue to {label}. Press Enter to sign in."

    async def action_sign_in(self) -> None:
        await self.app.sign_in(self.route_parameters)
