"""Textual screens and the screen factories the route table uses."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Type

from ...routing.builtin import ROUTES
from ...routing.table import RouteDefinition, ScreenFactory
from .base import RouteScreen
from .login import LoginScreen
from .not_found import NotFoundScreen

SCREEN_TYPES: Dict[str, Type[RouteScreen]] = {
    "login": LoginScreen,
    "not_found": NotFoundScreen,
}


def screen_factory_for(definition: RouteDefinition) -> ScreenFactory:
    screen_cls = SCREEN_TYPES.get(definition.name, RouteScreen)

    def _factory(name: str, parameters: Mapping[str, Any]) -> RouteScreen:
        return screen_cls(definition, parameters)

    return _factory


def build_screen_factories(
    definitions: Iterable[RouteDefinition] = ROUTES,
) -> Dict[str, ScreenFactory]:
    return {definition.name: screen_factory_for(definition) for definition in definitions}


__all__ = [
    "LoginScreen",
    "NotFoundScreen",
    "RouteScreen",
    "SCREEN_TYPES",
    "build_screen_factories",
    "screen_factory_for",
]
