"""Session services consumed by the router."""

from .session_store import SessionStore, TokenFileAuthProbe

__all__ = ["SessionStore", "TokenFileAuthProbe"]
