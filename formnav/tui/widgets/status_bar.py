"""Status bar widget for Textual screens."""

from __future__ import annotations

from textual.reactive import reactive
from textual.widgets import Static


def _badge(label: str, state: str) -> str:
    palette = {
        "signed_in": "green",
        "signed_out": "yellow",
        "unknown": "grey66",
    }
    color = palette.get(state, "grey66")
    return f"[{color}]●[/{color}] {label}"


class StatusBar(Static):
    """Session and stack depth badges."""

    session_state = reactive("unknown")
    stack_depth = reactive(0)

    def set_states(self, *, session: str, depth: int) -> None:
        self.session_state = session
        self.stack_depth = depth

    def _badges_text(self) -> str:
        session_label = self.session_state.replace("_", " ")
        return "  ".join(
            [
                _badge(f"Session: {session_label}", self.session_state),
                f"[dim]Stack depth: {self.stack_depth}[/dim]",
            ]
        )

    def watch_session_state(self) -> None:
        self.update(self._badges_text())

    def watch_stack_depth(self) -> None:
        self.update(self._badges_text())

    def on_mount(self) -> None:
        self.update(self._badges_text())
