"""Scenario tests for the named navigation helpers."""

import pytest

from formnav.errors import DuplicateRouteError
from formnav.routing import (
    DecisionKind,
    NavigationOrigin,
    NavigationRequest,
    RouteDefinition,
    RouteTable,
)


def _names(controller):
    return [frame.route_name for frame in controller.frames]


@pytest.mark.asyncio
async def test_guarded_route_while_signed_out_redirects_to_login(helpers, controller, events):
    await controller.start()

    event = await helpers.navigate_to("dashboard")

    assert event.decision_kind is DecisionKind.REDIRECT_TO_LOGIN
    assert controller.top.parameters["return_to"] == NavigationRequest("dashboard")
    assert _names(controller) == ["login"]


@pytest.mark.asyncio
async def test_login_while_signed_in_redirects_home(helpers, controller, probe):
    probe.set(True)
    await controller.start()
    await helpers.navigate_to("dashboard")

    event = await helpers.navigate_to("login")

    assert event.decision_kind is DecisionKind.REDIRECT_TO_HOME
    assert _names(controller) == ["home"]


@pytest.mark.asyncio
async def test_unknown_route_pushes_error_screen_over_previous_top(helpers, controller):
    await controller.start()
    previous_top = controller.top

    event = await helpers.navigate_to("nonexistent")

    assert event.decision_kind is DecisionKind.NOT_FOUND
    assert controller.frames[0] is previous_top
    assert _names(controller) == ["home", "not_found"]
    assert controller.top.parameters["route"] == "nonexistent"


def test_duplicate_home_aborts_table_construction():
    with pytest.raises(DuplicateRouteError):
        RouteTable([RouteDefinition("home"), RouteDefinition("home")])


@pytest.mark.asyncio
async def test_resume_after_login_reissues_original_request(helpers, controller, probe):
    await controller.start()
    await helpers.navigate_to("form_editor", {"form_id": "f-4"})
    assert _names(controller) == ["login"]

    probe.set(True)
    event = await helpers.resume_after_login()

    assert event.decision_kind is DecisionKind.ALLOW
    assert event.request_origin is NavigationOrigin.REDIRECT
    assert _names(controller) == ["form_editor"]
    assert controller.top.parameters == {"form_id": "f-4"}


@pytest.mark.asyncio
async def test_resume_after_login_without_pending_request_goes_home(helpers, controller, probe):
    await controller.start()
    await helpers.navigate_to_login()
    assert _names(controller) == ["home", "login"]

    probe.set(True)
    await helpers.resume_after_login()

    assert _names(controller) == ["home"]


@pytest.mark.asyncio
async def test_resume_after_login_still_guarded_when_sign_in_failed(helpers, controller):
    await controller.start()
    await helpers.navigate_to("dashboard")

    event = await helpers.resume_after_login()

    assert event.decision_kind is DecisionKind.REDIRECT_TO_LOGIN
    assert _names(controller) == ["login"]
    assert controller.top.parameters["return_to"].target_route_name == "dashboard"


@pytest.mark.asyncio
async def test_home_and_login_shortcuts(helpers, controller, probe):
    await controller.start()

    await helpers.navigate_to_home()
    assert _names(controller) == ["home", "home"]

    await helpers.reset_to_home()
    assert _names(controller) == ["home"]

    await helpers.navigate_to_login()
    assert _names(controller) == ["home", "login"]

    await helpers.go_back()
    assert _names(controller) == ["home"]

    probe.set(True)
    await helpers.navigate_to("dashboard")
    await helpers.reset_to_login()
    assert _names(controller) == ["home"]

    probe.set(False)
    await helpers.reset_to_login()
    assert _names(controller) == ["login"]
