"""Process-wide environment guard."""

import os
import sys
import typing as t
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import ClassVar

from ..config.view import ConfigView
from ..domain.environment import ENVIRONMENT_NAME, Environment
from ..domain.exceptions import (
    AlreadyInitializedError,
    InvalidRootError,
    NotInitializedError,
)
from ..infrastructure.logging import get_logger
from .constants import ConstantRegistry, process_constants
from .resolver import EnvironmentResolver

if t.TYPE_CHECKING:
    import loguru


class EnvironmentGuard:
    """Holds the validated deployment environment for the whole process.

    The guard can be constructed normally, but only once per process: the
    first successful construction becomes the live instance returned by
    `get_instance()`, and any further construction fails until the live
    instance is cleared with `reset_instance()` (meant for test harnesses).

    Construction resolves the environment from, in priority order, a
    ``-eAPPLICATION_ENV=<value>`` command line argument, the
    ``APPLICATION_ENV`` process constant and the ``APPLICATION_ENV`` OS
    environment variable. The resolved value is then pinned as the process
    constant, so later guards in the same process must agree with it.

    The check for a live instance and the registration are not atomic;
    construct the guard during single-threaded startup.
    """

    _instance: ClassVar["EnvironmentGuard | None"] = None

    def __init__(
        self,
        root_dir: str | Path,
        *,
        argv: Iterable[str] | None = None,
        environ: Mapping[str, str] | None = None,
        constants: ConstantRegistry | None = None,
        name: str = ENVIRONMENT_NAME,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialize the guard.

        Args:
            root_dir: Application root directory; must already exist
            argv: Command line arguments to scan (defaults to sys.argv)
            environ: OS environment to read (defaults to os.environ)
            constants: Process constant registry (defaults to the shared one)
            name: Name of the setting to resolve
            logger: Logger instance for recording guard lifecycle

        Raises:
            AlreadyInitializedError: If a live instance already exists
            InvalidRootError: If root_dir is not an existing directory
            EnvironmentNotSetError: If no source provides an environment
            UnsupportedEnvironmentError: If the environment is not supported
            ConstantConflictError: If the process constant disagrees
        """
        if EnvironmentGuard._instance is not None:
            raise AlreadyInitializedError()
        if not Path(root_dir).is_dir():
            raise InvalidRootError(root_dir)

        self._logger = logger
        self._root_dir = Path(root_dir)
        self._config: ConfigView | None = None

        constants = constants if constants is not None else process_constants
        resolver = EnvironmentResolver(
            name,
            argv=argv if argv is not None else sys.argv,
            constants=constants,
            environ=environ if environ is not None else os.environ,
            logger=logger,
        )
        environment = resolver.resolve()
        constants.define(name, environment.value)
        self._environment = environment

        EnvironmentGuard._instance = self
        self._logger.debug(
            f"Environment guard initialized: {environment} at {self._root_dir}"
        )

    @classmethod
    def get_instance(cls) -> "EnvironmentGuard":
        """Return the live instance.

        Raises:
            NotInitializedError: If no guard has been constructed
        """
        if EnvironmentGuard._instance is None:
            raise NotInitializedError()
        return EnvironmentGuard._instance

    @classmethod
    def reset_instance(cls, instance: "EnvironmentGuard | None" = None) -> None:
        """Replace or clear the live instance.

        For test isolation only; production code never calls this.
        """
        EnvironmentGuard._instance = instance

    @classmethod
    def is_initialized(cls) -> bool:
        return EnvironmentGuard._instance is not None

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    @property
    def config(self) -> ConfigView | None:
        """The attached configuration, or None if none was attached."""
        return self._config

    def attach_config(self, config: ConfigView) -> "EnvironmentGuard":
        """Attach the configuration view and return self for chaining."""
        self._config = config
        self._logger.debug(f"Attached config with {len(config)} top-level keys")
        return self
