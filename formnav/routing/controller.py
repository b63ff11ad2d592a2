"""Navigation controller: applies resolved decisions to the navigation stack."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

import structlog

from ..config import NavigationSettings, settings
from ..errors import NavigationClosedError, RouteNotFoundError, map_navigation_error
from .auth import AuthStateProbe
from .events import NavigationEvent, NavigationObserver, NavigationOperation
from .requests import (
    Allow,
    NavigationOrigin,
    NavigationRequest,
    NotFound,
    RedirectToHome,
    RedirectToLogin,
    ResolutionDecision,
)
from .resolver import RouteResolver
from .stack import Frame, NavigationStack
from .table import RouteDefinition, RouteTable, check_parameters

logger = structlog.get_logger(__name__)


class ControllerState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    TRANSITIONING = "transitioning"


class NavigationController:
    """Single owner of the navigation stack.

    Every operation resolves its request first and then mutates the stack.
    Operations are serialized through a FIFO lock, so they are applied and
    observed in the order they were issued even when the auth probe
    suspends.
    """

    def __init__(
        self,
        resolver: RouteResolver,
        *,
        home_route: str = "home",
        not_found_route: str = "not_found",
        return_to_key: str = "return_to",
        observers: Iterable[NavigationObserver] = (),
    ) -> None:
        self.resolver = resolver
        self.table: RouteTable = resolver.table
        self.home_route = home_route
        self.login_route = resolver.login_route
        self.not_found_route = not_found_route
        self.return_to_key = return_to_key
        self.table.require((home_route, self.login_route, not_found_route))

        self._stack = NavigationStack()
        self._lock = asyncio.Lock()
        self._state = ControllerState.IDLE
        self._closed = False
        self._observers: List[NavigationObserver] = list(observers)

    @classmethod
    def from_settings(
        cls,
        table: RouteTable,
        probe: AuthStateProbe,
        navigation: Optional[NavigationSettings] = None,
        *,
        observers: Iterable[NavigationObserver] = (),
    ) -> "NavigationController":
        navigation = navigation or settings.navigation
        resolver = RouteResolver(
            table,
            probe,
            login_route=navigation.login_route,
            probe_timeout=navigation.auth_probe_timeout,
        )
        return cls(
            resolver,
            home_route=navigation.home_route,
            not_found_route=navigation.not_found_route,
            return_to_key=navigation.return_to_key,
            observers=observers,
        )

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return self._stack.frames

    @property
    def top(self) -> Optional[Frame]:
        return self._stack.top

    def subscribe(self, observer: NavigationObserver) -> Callable[[], None]:
        """Register ``observer`` for navigation events; returns an unsubscribe callable."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    async def start(self) -> Optional[NavigationEvent]:
        """Seed the root frame with the home route."""
        return await self.reset_to(self.home_route, origin=NavigationOrigin.PROGRAMMATIC)

    def close(self) -> None:
        """Tear down. In-flight operations are discarded without touching the stack."""
        self._closed = True

    async def push(
        self,
        name: str,
        parameters: Optional[Mapping[str, Any]] = None,
        *,
        origin: NavigationOrigin = NavigationOrigin.USER_ACTION,
    ) -> Optional[NavigationEvent]:
        return await self._navigate(NavigationOperation.PUSH, name, parameters, origin)

    async def replace_top(
        self,
        name: str,
        parameters: Optional[Mapping[str, Any]] = None,
        *,
        origin: NavigationOrigin = NavigationOrigin.USER_ACTION,
    ) -> Optional[NavigationEvent]:
        return await self._navigate(
            NavigationOperation.REPLACE_TOP, name, parameters, origin
        )

    async def reset_to(
        self,
        name: str,
        parameters: Optional[Mapping[str, Any]] = None,
        *,
        origin: NavigationOrigin = NavigationOrigin.USER_ACTION,
    ) -> Optional[NavigationEvent]:
        return await self._navigate(NavigationOperation.RESET_TO, name, parameters, origin)

    async def pop(self) -> Optional[NavigationEvent]:
        """Go back one frame. The frame underneath is re-checked against the auth guard."""
        self._ensure_open()
        async with self._lock:
            if len(self._stack) <= 1:
                return None
            revealed = self._stack.frames[-2]
            request = NavigationRequest(
                revealed.route_name, revealed.parameters, NavigationOrigin.USER_ACTION
            )
            return await self._run(NavigationOperation.POP, request)

    def _ensure_open(self) -> None:
        if self._closed:
            raise NavigationClosedError("Navigation controller has been closed")

    async def _navigate(
        self,
        operation: NavigationOperation,
        name: str,
        parameters: Optional[Mapping[str, Any]],
        origin: NavigationOrigin,
    ) -> Optional[NavigationEvent]:
        self._ensure_open()
        request = NavigationRequest(name or "", parameters or {}, origin)
        async with self._lock:
            return await self._run(operation, request)

    async def _run(
        self, operation: NavigationOperation, request: NavigationRequest
    ) -> Optional[NavigationEvent]:
        # Caller holds the lock.
        if self._closed:
            logger.info(
                "navigation.discarded",
                target=request.target_route_name,
                operation=operation.value,
            )
            return None

        self._state = ControllerState.RESOLVING
        try:
            decision = await self.resolver.resolve(request)
            if self._closed:
                logger.info(
                    "navigation.discarded",
                    target=request.target_route_name,
                    operation=operation.value,
                    decision=decision.kind.value,
                )
                return None

            self._state = ControllerState.TRANSITIONING
            event = self._apply(operation, request, decision)
            self._emit(event)
            return event
        finally:
            self._state = ControllerState.IDLE

    def _apply(
        self,
        operation: NavigationOperation,
        request: NavigationRequest,
        decision: ResolutionDecision,
    ) -> NavigationEvent:
        previous = self._stack.top
        requested = self.table.get(request.target_route_name)

        if isinstance(decision, Allow):
            definition = self.table.lookup(decision.target_route_name)
            applied = self._apply_allow(operation, definition, decision.parameters)
        elif isinstance(decision, RedirectToLogin):
            operation = NavigationOperation.RESET_TO
            definition = self.table.lookup(self.login_route)
            frame = self._materialize(
                definition, {self.return_to_key: decision.original_request}
            )
            self._stack.reset(frame)
            applied = frame.route_name
        elif isinstance(decision, RedirectToHome):
            operation = NavigationOperation.RESET_TO
            frame = self._materialize(self.table.lookup(self.home_route), {})
            self._stack.reset(frame)
            applied = frame.route_name
        elif isinstance(decision, NotFound):
            # Push, never reset, so back navigation still works.
            operation = NavigationOperation.PUSH
            mapped = map_navigation_error(RouteNotFoundError(decision.requested_name))
            frame = self._materialize(
                self.table.lookup(self.not_found_route),
                {
                    "route": decision.requested_name,
                    "message": mapped.message,
                    "hint": mapped.hint,
                },
            )
            self._stack.push(frame)
            applied = frame.route_name
        else:
            raise TypeError(f"Unknown resolution decision: {decision!r}")

        return NavigationEvent(
            origin_route_name=previous.route_name if previous else None,
            target_route_name=request.target_route_name,
            applied_route_name=applied,
            decision_kind=decision.kind,
            requires_auth=requested.requires_auth if requested else False,
            operation=operation,
            request_origin=request.origin,
            stack_depth=len(self._stack),
        )

    def _apply_allow(
        self,
        operation: NavigationOperation,
        definition: RouteDefinition,
        parameters: Mapping[str, Any],
    ) -> str:
        if operation is NavigationOperation.POP:
            self._stack.pop()
            return definition.name

        problems = check_parameters(definition, parameters)
        if problems:
            logger.warning(
                "navigation.parameter_mismatch",
                route=definition.name,
                problems=problems,
            )

        frame = self._materialize(definition, parameters)
        if operation is NavigationOperation.PUSH:
            self._stack.push(frame)
        elif operation is NavigationOperation.REPLACE_TOP:
            self._stack.replace_top(frame)
        else:
            self._stack.reset(frame)
        return frame.route_name

    @staticmethod
    def _materialize(definition: RouteDefinition, parameters: Mapping[str, Any]) -> Frame:
        # Build the screen before mutating so a failing factory leaves the stack untouched.
        screen = definition.factory(definition.name, parameters) if definition.factory else None
        return Frame(definition.name, parameters, screen)

    def _emit(self, event: NavigationEvent) -> None:
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception:
                logger.exception(
                    "navigation.observer_failed",
                    observer=getattr(observer, "__name__", repr(observer)),
                    target=event.target_route_name,
                )
