"""Base Textual screen rendered for a resolved route."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from textual.app import ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Label, Static

from ...routing.table import RouteDefinition
from ..widgets import Breadcrumb, StatusBar


class RouteScreen(Screen):
    """Simple screen with a title, help copy and the route parameters."""

    def __init__(self, definition: RouteDefinition, parameters: Mapping[str, Any]) -> None:
        super().__init__()
        self.definition = definition
        self.route_parameters: Dict[str, Any] = dict(parameters)

    @property
    def screen_title(self) -> str:
        return self.definition.label

    def detail_text(self) -> str:
        shown = {
            key: value
            for key, value in self.route_parameters.items()
            if isinstance(value, (str, int, float, bool))
        }
        if not shown:
            return ""
        return "  ".join(f"{key}={value}" for key, value in sorted(shown.items()))

    def compose(self) -> ComposeResult:
        with Container(id="screen-body"):
            yield Breadcrumb(id="breadcrumb")
            yield Label(self.screen_title, id="screen-title")
            yield Static(self.definition.description, id="screen-help")
            yield Static(self.detail_text(), id="screen-detail")
            yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        self._refresh_chrome()

    def on_screen_resume(self) -> None:
        try:
            self._refresh_chrome()
        except NoMatches:
            pass

    def _refresh_chrome(self) -> None:
        breadcrumb = self.query_one("#breadcrumb", Breadcrumb)
        breadcrumb.set_trail(self.app.trail_labels())
        status_bar = self.query_one("#status-bar", StatusBar)
        status_bar.set_states(
            session=self.app.session_state(),
            depth=len(self.app.controller.frames),
        )
