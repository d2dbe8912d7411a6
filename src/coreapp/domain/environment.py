"""Deployment environment domain model."""

import enum
from typing import Final


class Environment(enum.StrEnum):
    """Deployment stage the application is running in.

    Values are the exact strings accepted from the command line, process
    constants and OS environment variables.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    BUILD = "build"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """All supported environment strings, in declaration order."""
        return tuple(member.value for member in cls)


ENVIRONMENT_NAME: Final = "APPLICATION_ENV"
