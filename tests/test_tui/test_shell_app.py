"""Tests for the Textual shell wiring."""

import pytest

from formnav.routing import NavigationRequest, ROUTE_MAP
from formnav.services import SessionStore
from formnav.tui import FormNavApp
from formnav.tui.screens import (
    LoginScreen,
    NotFoundScreen,
    RouteScreen,
    build_screen_factories,
)
from formnav.tui.widgets.breadcrumb import format_trail


def test_global_bindings_include_navigation_shortcuts():
    keys = {binding.key for binding in FormNavApp.BINDINGS}

    assert {"q", "h", "d", "e", "l", "b", "o"} <= keys


def test_screen_factories_cover_every_route():
    factories = build_screen_factories()

    assert set(factories) == set(ROUTE_MAP)
    assert isinstance(factories["login"]("login", {}), LoginScreen)
    assert isinstance(factories["not_found"]("not_found", {}), NotFoundScreen)
    screen = factories["form_editor"]("form_editor", {"form_id": "f-1"})
    assert type(screen) is RouteScreen
    assert screen.screen_title == "Form Editor"
    assert screen.detail_text() == "form_id=f-1"


def test_login_screen_names_pending_destination():
    screen = LoginScreen(
        ROUTE_MAP["login"], {"return_to": NavigationRequest("submissions", {"form_id": "f"})}
    )

    assert screen.pending_request.target_route_name == "submissions"
    assert "continue to Submissions" in screen.detail_text()
    assert LoginScreen(ROUTE_MAP["login"], {}).detail_text() == "Press Enter to sign in."


def test_not_found_screen_shows_mapped_message():
    screen = NotFoundScreen(
        ROUTE_MAP["not_found"],
        {"route": "ghost", "message": "There is no screen named 'ghost'.", "hint": "Go back."},
    )

    assert "There is no screen named 'ghost'." in screen.detail_text()
    assert screen.detail_text().endswith("Go back.")


def test_format_trail():
    assert format_trail(["Home", "Dashboard"]) == "Home > Dashboard"
    assert format_trail([]) == "Home"


@pytest.fixture
def shell(tmp_path, monkeypatch):
    app = FormNavApp(session_store=SessionStore(tmp_path / "session.token"))
    calls = []
    monkeypatch.setattr(app, "push_screen", lambda screen: calls.append(("push", screen)))
    monkeypatch.setattr(app, "pop_screen", lambda: calls.append(("pop", None)))
    monkeypatch.setattr(app, "switch_screen", lambda screen: calls.append(("switch", screen)))
    return app, calls


def _ops(calls):
    return [
        (op, screen.definition.name if screen is not None else None)
        for op, screen in calls
    ]


@pytest.mark.asyncio
async def test_controller_changes_are_mirrored_onto_screen_stack(shell):
    app, calls = shell

    await app.controller.start()
    await app.action_show_dashboard()

    assert app.session_state() == "signed_out"
    assert _ops(calls) == [("push", "home"), ("pop", None), ("push", "login")]
    assert app.trail_labels() == ["Login"]

    calls.clear()
    await app.sign_in(app.controller.top.parameters)

    assert app.session_state() == "signed_in"
    assert _ops(calls) == [("pop", None), ("push", "dashboard")]

    calls.clear()
    await app.action_show_editor()
    await app.action_show_unknown()
    await app.action_go_back()

    assert _ops(calls) == [
        ("push", "form_editor"),
        ("push", "not_found"),
        ("pop", None),
    ]
    assert app.trail_labels() == ["Dashboard", "Form Editor"]

    calls.clear()
    await app.action_sign_out()

    assert app.session_state() == "signed_out"
    assert _ops(calls) == [("pop", None), ("pop", None), ("push", "login")]
