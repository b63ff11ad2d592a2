"""Navigation stack frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Frame:
    """One active screen on the navigation stack."""

    route_name: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    screen: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))


class NavigationStack:
    """Ordered frames, root at index 0. Owned by a single controller."""

    def __init__(self) -> None:
        self._frames: List[Frame] = []

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def top(self) -> Optional[Frame]:
        return self._frames[-1] if self._frames else None

    def push(self, frame: Frame) -> None:
        self._frames.append(frame)

    def replace_top(self, frame: Frame) -> Optional[Frame]:
        """Substitute the top frame; on an empty stack this seeds the root."""
        replaced = self._frames.pop() if self._frames else None
        self._frames.append(frame)
        return replaced

    def reset(self, frame: Frame) -> Tuple[Frame, ...]:
        cleared = tuple(self._frames)
        self._frames = [frame]
        return cleared

    def pop(self) -> Optional[Frame]:
        """Drop the top frame. The root frame is never removed."""
        if len(self._frames) <= 1:
            return None
        return self._frames.pop()

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self):
        return iter(self.frames)
