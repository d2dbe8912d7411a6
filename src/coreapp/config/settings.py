import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain.environment import ENVIRONMENT_NAME, Environment


class LogLevel(enum.StrEnum):
    """Log levels understood by the logging setup."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    """Minimal settings container used to bootstrap the app.

    `environment` only picks the logging format before the guard has run;
    the authoritative environment always comes from `EnvironmentGuard`.
    """

    model_config = ConfigDict(frozen=True)

    environment_name: str = Field(
        default=ENVIRONMENT_NAME,
        min_length=1,
        description="Name of the argument, constant and env var to resolve",
    )
    log_level: LogLevel = Field(default=LogLevel.INFO)
    environment: Environment | None = Field(default=None)


def build_settings(**overrides: Any) -> Settings:
    """Build Settings from keyword overrides, ignoring None values."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
