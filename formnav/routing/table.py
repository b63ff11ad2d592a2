"""Typed route registry for screen navigation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..errors import DuplicateRouteError, NavigationError, RouteNotFoundError

ScreenFactory = Callable[[str, Mapping[str, Any]], Any]
ParameterType = Union[type, Tuple[type, ...]]


@dataclass(frozen=True)
class RouteDefinition:
    """Represents a named, addressable screen."""

    name: str
    requires_auth: bool = False
    parameter_schema: Optional[Mapping[str, ParameterType]] = field(
        default=None, compare=False
    )
    factory: Optional[ScreenFactory] = field(default=None, compare=False)
    label: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if self.parameter_schema is not None:
            object.__setattr__(
                self, "parameter_schema", MappingProxyType(dict(self.parameter_schema))
            )
        if not self.label:
            object.__setattr__(self, "label", self.name.replace("_", " ").title())

    @property
    def is_public(self) -> bool:
        return not self.requires_auth


def describe_type(expected: ParameterType) -> str:
    if isinstance(expected, tuple):
        return " | ".join(t.__name__ for t in expected)
    return expected.__name__


def check_parameters(
    definition: RouteDefinition, parameters: Mapping[str, Any]
) -> List[str]:
    """Return schema mismatches for ``parameters``; extra keys are allowed."""
    if not definition.parameter_schema:
        return []

    problems: List[str] = []
    for key, expected in definition.parameter_schema.items():
        if key not in parameters:
            problems.append(f"missing parameter '{key}'")
            continue
        value = parameters[key]
        if not isinstance(value, expected):
            problems.append(
                f"parameter '{key}' expected {describe_type(expected)}, got {type(value).__name__}"
            )
    return problems


class RouteTable:
    """Registry mapping route names to their definitions.

    Populated once at startup, then frozen. Duplicate names are a
    programming error and abort construction.
    """

    def __init__(self, definitions: Iterable[RouteDefinition] = ()) -> None:
        self._routes: Dict[str, RouteDefinition] = {}
        self._frozen = False
        for definition in definitions:
            self.register(definition)

    def register(self, definition: RouteDefinition) -> RouteDefinition:
        if self._frozen:
            raise NavigationError(
                f"Cannot register '{definition.name}': route table is frozen"
            )
        if not definition.name:
            raise NavigationError("Route definitions need a non-empty name")
        if definition.name in self._routes:
            raise DuplicateRouteError(definition.name)
        self._routes[definition.name] = definition
        return definition

    def freeze(self) -> "RouteTable":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Optional[RouteDefinition]:
        """Return the definition for ``name``, or None when unregistered."""
        return self._routes.get(name)

    def lookup(self, name: str) -> RouteDefinition:
        definition = self._routes.get(name)
        if definition is None:
            raise RouteNotFoundError(name)
        return definition

    def is_public(self, name: str) -> bool:
        return self.lookup(name).is_public

    def require(self, names: Iterable[str]) -> None:
        """Fail at startup if any of ``names`` is missing from the table."""
        for name in names:
            self.lookup(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __iter__(self) -> Iterator[RouteDefinition]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)
