"""Structured navigation events for logging and telemetry observers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional

import structlog

from .requests import DecisionKind, NavigationOrigin

logger = structlog.get_logger(__name__)


class NavigationOperation(str, Enum):
    PUSH = "push"
    REPLACE_TOP = "replace_top"
    RESET_TO = "reset_to"
    POP = "pop"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class NavigationEvent:
    """One navigation attempt, emitted after the stack change is applied.

    ``target_route_name`` is what the caller asked for; ``applied_route_name``
    is the frame that ended up on top (login, home or the error screen when
    the request was redirected).
    """

    origin_route_name: Optional[str]
    target_route_name: str
    applied_route_name: Optional[str]
    decision_kind: DecisionKind
    requires_auth: bool
    operation: NavigationOperation
    request_origin: NavigationOrigin = NavigationOrigin.USER_ACTION
    stack_depth: int = 0
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def is_error(self) -> bool:
        return self.decision_kind is DecisionKind.NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["decision_kind"] = self.decision_kind.value
        payload["operation"] = self.operation.value
        payload["request_origin"] = self.request_origin.value
        payload["timestamp"] = self.timestamp.isoformat()
        payload["is_error"] = self.is_error
        return payload


NavigationObserver = Callable[[NavigationEvent], None]

_EVENT_NAMES = {
    DecisionKind.ALLOW: "navigation.allow",
    DecisionKind.REDIRECT_TO_LOGIN: "navigation.redirect_login",
    DecisionKind.REDIRECT_TO_HOME: "navigation.redirect_home",
    DecisionKind.NOT_FOUND: "navigation.not_found",
}


def log_navigation_event(event: NavigationEvent) -> None:
    """Observer that writes every navigation event to the structured log."""
    payload = event.to_dict()
    name = _EVENT_NAMES[event.decision_kind]
    if event.is_error:
        logger.warning(name, **payload)
    else:
        logger.info(name, **payload)
