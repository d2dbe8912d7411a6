from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config.settings import Settings
from .config.view import ConfigView
from .domain.environment import Environment
from .environment.constants import ConstantRegistry
from .environment.guard import EnvironmentGuard
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the bootstrap `Settings` and the process `EnvironmentGuard`, so
    downstream code can be handed one object instead of reaching for the
    guard's global accessor.
    """

    settings: Settings
    guard: EnvironmentGuard

    @property
    def environment(self) -> Environment:
        return self.guard.environment

    @property
    def config(self) -> ConfigView | None:
        return self.guard.config


def create_app(
    root_dir: str | Path,
    settings: Settings | None = None,
    config: Mapping[str, Any] | None = None,
    *,
    argv: Iterable[str] | None = None,
    environ: Mapping[str, str] | None = None,
    constants: ConstantRegistry | None = None,
) -> App:
    """Set up logging, construct the guard and attach config if given.

    Keep logic here minimal so boot is predictable and test-friendly.
    """
    settings = settings or Settings()
    setup_logging(settings)

    guard = EnvironmentGuard(
        root_dir,
        argv=argv,
        environ=environ,
        constants=constants,
        name=settings.environment_name,
    )
    if config is not None:
        guard.attach_config(ConfigView(config))
    return App(settings=settings, guard=guard)
