"""Named navigation shortcuts for call sites."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .controller import NavigationController
from .events import NavigationEvent
from .requests import NavigationOrigin, NavigationRequest


class NavigationHelpers:
    """Thin wrappers over a controller for the well-known routes."""

    def __init__(self, controller: NavigationController) -> None:
        self.controller = controller

    async def navigate_to(
        self, name: str, parameters: Optional[Mapping[str, Any]] = None
    ) -> Optional[NavigationEvent]:
        return await self.controller.push(name, parameters)

    async def navigate_to_home(self) -> Optional[NavigationEvent]:
        return await self.controller.push(self.controller.home_route)

    async def navigate_to_login(self) -> Optional[NavigationEvent]:
        return await self.controller.push(self.controller.login_route)

    async def reset_to_home(self) -> Optional[NavigationEvent]:
        return await self.controller.reset_to(self.controller.home_route)

    async def reset_to_login(self) -> Optional[NavigationEvent]:
        return await self.controller.reset_to(self.controller.login_route)

    async def go_back(self) -> Optional[NavigationEvent]:
        return await self.controller.pop()

    async def resume_after_login(
        self, parameters: Optional[Mapping[str, Any]] = None
    ) -> Optional[NavigationEvent]:
        """Re-issue the request the login screen was opened for.

        ``parameters`` defaults to the current top frame's parameters.
        Without a preserved request this resets to home.
        """
        if parameters is None:
            top = self.controller.top
            parameters = top.parameters if top else {}
        original = parameters.get(self.controller.return_to_key)
        if not isinstance(original, NavigationRequest):
            return await self.reset_to_home()
        return await self.controller.reset_to(
            original.target_route_name,
            original.parameters,
            origin=NavigationOrigin.REDIRECT,
        )
