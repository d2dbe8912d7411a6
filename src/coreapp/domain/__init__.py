"""Domain layer - environment model and exceptions."""

from .environment import ENVIRONMENT_NAME, Environment
from .exceptions import (
    AlreadyInitializedError,
    ConstantConflictError,
    CoreAppError,
    EnvironmentNotSetError,
    InvalidRootError,
    KeyNotSetError,
    NotInitializedError,
    UnsupportedEnvironmentError,
)

__all__ = [
    # Environment
    "ENVIRONMENT_NAME",
    "Environment",
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
