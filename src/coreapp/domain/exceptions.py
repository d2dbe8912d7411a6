"""Custom exceptions for coreapp."""

from pathlib import Path
from typing import Any


class CoreAppError(Exception):
    """Base exception for coreapp errors."""

    pass


class InvalidRootError(CoreAppError):
    """Raised when the application root is not an existing directory."""

    def __init__(self, root_dir: str | Path) -> None:
        self.root_dir = root_dir
        super().__init__(f"Invalid root directory '{root_dir}'")


class AlreadyInitializedError(CoreAppError):
    """Raised when a second EnvironmentGuard is constructed in one process.

    The live instance must be cleared with ``EnvironmentGuard.reset_instance``
    before another can be created.
    """

    def __init__(self) -> None:
        super().__init__("App instance already created")


class NotInitializedError(CoreAppError):
    """Raised when the EnvironmentGuard is accessed before construction."""

    def __init__(self) -> None:
        super().__init__("App not instantiated")


class EnvironmentNotSetError(CoreAppError):
    """Raised when no source provides an environment value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} not set")


class UnsupportedEnvironmentError(CoreAppError):
    """Raised when the resolved environment is not a supported value."""

    def __init__(self, value: str, allowed: tuple[str, ...]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(f"Unknown/unsupported application env '{value}'")


class ConstantConflictError(CoreAppError):
    """Raised when a process constant is already defined with another value."""

    def __init__(self, name: str, existing: Any) -> None:
        self.name = name
        self.existing = existing
        super().__init__(f"{name} constant already set to '{existing}'")


class KeyNotSetError(CoreAppError, KeyError):
    """Raised when a configuration key is missing at the current level.

    Also a ``KeyError`` so mapping-style callers can catch it the usual way.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Config not set for '{key}'")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
