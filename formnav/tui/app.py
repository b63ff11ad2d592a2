"""Textual shell hosting the authenticated router."""

from __future__ import annotations

import uuid
from typing import Any, List, Mapping, Optional

import structlog
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..config import settings
from ..errors import AuthProbeUnavailable
from ..routing import (
    NavigationController,
    NavigationEvent,
    NavigationHelpers,
    NavigationOperation,
    build_route_table,
    log_navigation_event,
)
from ..services import SessionStore, TokenFileAuthProbe
from .screens import build_screen_factories

logger = structlog.get_logger(__name__)

DEMO_FORM_ID = "contact-form"


class FormNavApp(App[None]):
    """Interactive shell; every screen change goes through the controller."""

    TITLE = "Form Builder"
    CSS = """
    #screen-body {
        padding: 1 2;
    }

    #screen-title {
        text-style: bold;
        color: cyan;
        margin-bottom: 1;
    }

    #screen-help {
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("h", "show_home", "Home"),
        Binding("d", "show_dashboard", "Dashboard"),
        Binding("e", "show_editor", "Editor"),
        Binding("l", "show_login", "Login"),
        Binding("u", "show_unknown", "Unknown", show=False),
        Binding("b", "go_back", "Back"),
        Binding("o", "sign_out", "Sign out"),
    ]

    def __init__(self, *, session_store: Optional[SessionStore] = None) -> None:
        super().__init__()
        self.session_store = session_store or SessionStore(
            settings.navigation.session_token_path
        )
        table = build_route_table(build_screen_factories())
        self.controller = NavigationController.from_settings(
            table,
            TokenFileAuthProbe(self.session_store),
            observers=[log_navigation_event, self._mirror_stack],
        )
        self.helpers = NavigationHelpers(self.controller)
        self._mirrored = 0

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Footer()

    async def on_mount(self) -> None:
        await self.controller.start()

    def on_unmount(self) -> None:
        self.controller.close()

    def trail_labels(self) -> List[str]:
        labels = []
        for frame in self.controller.frames:
            definition = self.controller.table.get(frame.route_name)
            labels.append(definition.label if definition else frame.route_name)
        return labels

    def session_state(self) -> str:
        try:
            token = self.session_store.load()
        except AuthProbeUnavailable:
            return "unknown"
        return "signed_in" if token else "signed_out"

    def _mirror_stack(self, event: NavigationEvent) -> None:
        """Replay the controller's stack change onto the Textual screen stack."""
        top = self.controller.top
        if event.operation is NavigationOperation.POP:
            self.pop_screen()
            self._mirrored -= 1
            return
        if event.operation is NavigationOperation.REPLACE_TOP and self._mirrored:
            self.switch_screen(top.screen)
            return
        if event.operation is NavigationOperation.RESET_TO:
            while self._mirrored:
                self.pop_screen()
                self._mirrored -= 1
        self.push_screen(top.screen)
        self._mirrored += 1

    async def sign_in(self, parameters: Mapping[str, Any]) -> None:
        self.session_store.save(uuid.uuid4().hex)
        logger.info("session.signed_in")
        await self.helpers.resume_after_login(parameters)

    async def action_sign_out(self) -> None:
        self.session_store.clear()
        logger.info("session.signed_out")
        await self.helpers.reset_to_login()

    async def action_show_home(self) -> None:
        await self.helpers.reset_to_home()

    async def action_show_dashboard(self) -> None:
        await self.helpers.navigate_to("dashboard")

    async def action_show_editor(self) -> None:
        await self.helpers.navigate_to("form_editor", {"form_id": DEMO_FORM_ID})

    async def action_show_login(self) -> None:
        await self.helpers.navigate_to_login()

    async def action_show_unknown(self) -> None:
        await self.helpers.navigate_to("archive")

    async def action_go_back(self) -> None:
        await self.helpers.go_back()

