"""Error screen for unregistered routes."""

from __future__ import annotations

from .base import RouteScreen


class NotFoundScreen(RouteScreen):
    def detail_text(self) -> str:
        message = self.route_parameters.get("message") or "Unknown screen."
        hint = self.route_parameters.get("hint", "")
        return f"[red]{message}[/red]\n{hint}".rstrip()
