"""Configuration package for the navigation core."""

from .settings import LoggingSettings, NavigationSettings, Settings, settings

__all__ = ["LoggingSettings", "NavigationSettings", "Settings", "settings"]
