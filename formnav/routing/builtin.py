"""Default route list for the form builder."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Mapping, Optional, Tuple

from .table import RouteDefinition, RouteTable, ScreenFactory

ROUTES: Tuple[RouteDefinition, ...] = (
    RouteDefinition("home", description="Landing page and overview."),
    RouteDefinition("login", description="Sign in to manage your forms."),
    RouteDefinition("dashboard", requires_auth=True, description="Your forms at a glance."),
    RouteDefinition(
        "form_editor",
        requires_auth=True,
        parameter_schema={"form_id": str},
        label="Form Editor",
        description="Add, reorder and edit form fields.",
    ),
    RouteDefinition(
        "form_preview",
        requires_auth=True,
        parameter_schema={"form_id": str},
        label="Form Preview",
        description="Preview a form as respondents see it.",
    ),
    RouteDefinition(
        "submissions",
        requires_auth=True,
        parameter_schema={"form_id": str},
        description="Browse responses submitted to a form.",
    ),
    RouteDefinition("settings", requires_auth=True, description="Account and workspace settings."),
    RouteDefinition("not_found", label="Not Found", description="The requested screen does not exist."),
)

ROUTE_MAP: Dict[str, RouteDefinition] = {route.name: route for route in ROUTES}


def build_route_table(
    factories: Optional[Mapping[str, ScreenFactory]] = None,
) -> RouteTable:
    """Build the frozen default table, attaching screen factories by route name."""
    factories = factories or {}
    unknown = sorted(set(factories) - set(ROUTE_MAP))
    if unknown:
        raise KeyError(f"Screen factories given for unknown routes: {unknown}")
    table = RouteTable(
        replace(route, factory=factories[route.name]) if route.name in factories else route
        for route in ROUTES
    )
    return table.freeze()
