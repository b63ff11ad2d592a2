"""Stored session token persistence and the probe that reads it."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Optional, Union

from ..errors import AuthProbeUnavailable


class SessionStore:
    """Read/write a session token file with atomic replacement."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise AuthProbeUnavailable(
                f"Session token at '{self.path}' could not be read: {exc}"
            ) from exc
        return token or None

    def save(self, token: str) -> None:
        if not token or not token.strip():
            raise ValueError("Session token must not be empty")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        fd = os.open(str(temp_path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(token.strip() + "\n")
        os.replace(temp_path, self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class TokenFileAuthProbe:
    """Async probe backed by a stored session token.

    The file read runs off the event loop; a missing token means signed
    out, an unreadable one raises ``AuthProbeUnavailable``.
    """

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    async def is_authenticated(self) -> bool:
        token = await asyncio.to_thread(self.store.load)
        return token is not None
