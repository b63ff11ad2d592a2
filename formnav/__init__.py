"""Authenticated screen router for the form builder."""

__version__ = "1.0.0"
