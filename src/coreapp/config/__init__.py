"""Configuration - bootstrap settings and the read-only config view."""

from .settings import LogLevel, Settings, build_settings
from .view import ConfigView

__all__ = [
    "ConfigView",
    "LogLevel",
    "Settings",
    "build_settings",
]
