"""Textual shell for the form builder router."""

from .app import FormNavApp

__all__ = ["FormNavApp"]
