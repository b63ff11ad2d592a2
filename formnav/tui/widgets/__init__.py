"""Shared Textual widgets for the form builder shell."""

from .breadcrumb import Breadcrumb
from .status_bar import StatusBar

__all__ = ["Breadcrumb", "StatusBar"]
