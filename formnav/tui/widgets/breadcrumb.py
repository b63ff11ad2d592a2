"""Breadcrumb widget for Textual screens."""

from __future__ import annotations

from typing import Iterable

from textual.reactive import reactive
from textual.widgets import Static


def format_trail(labels: Iterable[str]) -> str:
    trail = " > ".join(label for label in labels if label)
    return trail or "Home"


class Breadcrumb(Static):
    """Navigation stack trail that can be updated by screens."""

    _path = reactive("Home")

    def set_trail(self, labels: Iterable[str]) -> None:
        self._path = format_trail(labels)

    def watch__path(self, path: str) -> None:
        self.update(f"[dim]{path}[/dim]")

    def on_mount(self) -> None:
        self.update(f"[dim]{self._path}[/dim]")
