"""Auth state probe boundary and snapshot helper."""

from __future__ import annotations

import asyncio
import inspect
from typing import Awaitable, Callable, Optional, Protocol, Union

import structlog

from ..errors import AuthProbeUnavailable, map_navigation_error

logger = structlog.get_logger(__name__)

ProbeResult = Union[bool, Awaitable[bool]]


class AuthStateProbe(Protocol):
    """Session provider dependency: is a user currently signed in?

    May be sync or async. Absence of a session is ``False``, not an error.
    """

    def is_authenticated(self) -> ProbeResult: ...


class StaticAuthProbe:
    """Probe with a settable answer, for wiring and tests."""

    def __init__(self, authenticated: bool = False) -> None:
        self.authenticated = authenticated

    def set(self, authenticated: bool) -> None:
        self.authenticated = authenticated

    def is_authenticated(self) -> bool:
        return self.authenticated


class CallableAuthProbe:
    """Adapts a plain sync or async callable to the probe interface."""

    def __init__(self, check: Callable[[], ProbeResult]) -> None:
        self._check = check

    def is_authenticated(self) -> ProbeResult:
        return self._check()


async def take_snapshot(probe: AuthStateProbe, *, timeout: Optional[float] = None) -> bool:
    """Query ``probe`` once and return a point-in-time auth snapshot.

    Any probe failure or timeout counts as unauthenticated so guarded
    routes fail closed.
    """
    try:
        result = probe.is_authenticated()
        if inspect.isawaitable(result):
            if timeout is not None:
                result = await asyncio.wait_for(result, timeout)
            else:
                result = await result
        return bool(result)
    except asyncio.TimeoutError:
        logger.warning("auth_probe.timeout", timeout=timeout)
        return False
    except AuthProbeUnavailable as exc:
        logger.warning(
            "auth_probe.unavailable",
            code=map_navigation_error(exc).code,
            error=str(exc),
        )
        return False
    except Exception as exc:
        logger.warning(
            "auth_probe.failed",
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return False
