"""coreapp - environment detection and read-only configuration for app startup."""

from .app import App, create_app
from .config import ConfigView, LogLevel, Settings, build_settings
from .domain import (
    ENVIRONMENT_NAME,
    AlreadyInitializedError,
    ConstantConflictError,
    CoreAppError,
    Environment,
    EnvironmentNotSetError,
    InvalidRootError,
    KeyNotSetError,
    NotInitializedError,
    UnsupportedEnvironmentError,
)
from .environment import ConstantRegistry, EnvironmentGuard, process_constants

__all__ = [
    # App
    "App",
    "create_app",
    # Environment
    "ENVIRONMENT_NAME",
    "Environment",
    "EnvironmentGuard",
    "ConstantRegistry",
    "process_constants",
    # Config
    "ConfigView",
    "LogLevel",
    "Settings",
    "build_settings",
    # Exceptions
    "AlreadyInitializedError",
    "ConstantConflictError",
    "CoreAppError",
    "EnvironmentNotSetError",
    "InvalidRootError",
    "KeyNotSetError",
    "NotInitializedError",
    "UnsupportedEnvironmentError",
]
