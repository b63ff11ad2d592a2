"""Navigation requests and the decisions resolved from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Union


class NavigationOrigin(str, Enum):
    USER_ACTION = "user_action"
    REDIRECT = "redirect"
    PROGRAMMATIC = "programmatic"


class DecisionKind(str, Enum):
    ALLOW = "allow"
    REDIRECT_TO_LOGIN = "redirect_to_login"
    REDIRECT_TO_HOME = "redirect_to_home"
    NOT_FOUND = "not_found"


def _frozen_parameters(parameters: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(parameters or {}))


@dataclass(frozen=True)
class NavigationRequest:
    """A single navigation attempt. Consumed by the resolver, then discarded."""

    target_route_name: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    origin: NavigationOrigin = NavigationOrigin.USER_ACTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", _frozen_parameters(self.parameters))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target_route_name": self.target_route_name,
            "parameters": dict(self.parameters),
            "origin": self.origin.value,
        }


@dataclass(frozen=True)
class Allow:
    kind: ClassVar[DecisionKind] = DecisionKind.ALLOW

    target_route_name: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", _frozen_parameters(self.parameters))


@dataclass(frozen=True)
class RedirectToLogin:
    """Access to an auth-guarded route was refused; the request is kept for resumption."""

    kind: ClassVar[DecisionKind] = DecisionKind.REDIRECT_TO_LOGIN

    original_request: NavigationRequest


@dataclass(frozen=True)
class RedirectToHome:
    kind: ClassVar[DecisionKind] = DecisionKind.REDIRECT_TO_HOME


@dataclass(frozen=True)
class NotFound:
    kind: ClassVar[DecisionKind] = DecisionKind.NOT_FOUND

    requested_name: str


ResolutionDecision = Union[Allow, RedirectToLogin, RedirectToHome, NotFound]
