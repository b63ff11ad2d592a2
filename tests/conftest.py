"""
Pytest configuration and fixtures for navigation tests.
"""

import pytest

from formnav.routing import (
    NavigationController,
    NavigationHelpers,
    RouteDefinition,
    RouteResolver,
    RouteTable,
    StaticAuthProbe,
)


@pytest.fixture
def scenario_routes():
    """Route list used by the navigation scenarios."""
    return [
        RouteDefinition("home"),
        RouteDefinition("dashboard", requires_auth=True),
        RouteDefinition("login"),
        RouteDefinition("not_found"),
        RouteDefinition(
            "form_editor", requires_auth=True, parameter_schema={"form_id": str}
        ),
    ]


@pytest.fixture
def route_table(scenario_routes):
    return RouteTable(scenario_routes).freeze()


@pytest.fixture
def probe():
    return StaticAuthProbe(authenticated=False)


@pytest.fixture
def resolver(route_table, probe):
    return RouteResolver(route_table, probe, login_route="login")


@pytest.fixture
def make_controller(route_table, probe):
    """Build a controller over the scenario table, optionally with another probe."""

    def _make(auth_probe=None, observers=()):
        resolver = RouteResolver(route_table, auth_probe or probe, login_route="login")
        return NavigationController(resolver, observers=observers)

    return _make


@pytest.fixture
def events():
    return []


@pytest.fixture
def controller(make_controller, events):
    return make_controller(observers=[events.append])


@pytest.fixture
def helpers(controller):
    return NavigationHelpers(controller)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("NAV_SESSION_TOKEN_PATH", str(tmp_path / "session.token"))
