"""Environment value resolution from argv, constants and OS environment."""

import enum
import typing as t
from collections.abc import Iterable, Mapping

from ..domain.environment import Environment
from ..domain.exceptions import EnvironmentNotSetError, UnsupportedEnvironmentError
from ..infrastructure.logging import get_logger
from .constants import ConstantRegistry

if t.TYPE_CHECKING:
    import loguru


class ValueSource(enum.StrEnum):
    """Where a resolved environment value came from."""

    ARGV = "argv"
    CONSTANT = "constant"
    ENVIRON = "environ"


def argument_prefix(name: str) -> str:
    """Command line prefix carrying a setting, e.g. ``-eAPPLICATION_ENV=``."""
    return f"-e{name}="


class EnvironmentResolver:
    """Resolve a named setting from prioritized sources.

    Priority, highest first:

    1. a command line argument of the form ``-e<NAME>=<value>`` (first wins)
    2. a process constant named ``<NAME>``
    3. a non-empty OS environment variable named ``<NAME>``
    """

    def __init__(
        self,
        name: str,
        *,
        argv: Iterable[str] | None,
        constants: ConstantRegistry,
        environ: Mapping[str, str],
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        self.name = name
        self._argv = argv
        self._constants = constants
        self._environ = environ
        self._logger = logger

    def lookup(self) -> tuple[str, ValueSource] | None:
        """Find the raw value and its source, or None if no source has one."""
        if self._argv is not None:
            prefix = argument_prefix(self.name)
            for arg in self._argv:
                if arg.startswith(prefix):
                    return arg[len(prefix) :], ValueSource.ARGV

        if self._constants.is_defined(self.name):
            return self._constants.get(self.name), ValueSource.CONSTANT

        value = self._environ.get(self.name)
        if value:
            return value, ValueSource.ENVIRON

        return None

    def resolve(self) -> Environment:
        """Resolve and validate the environment.

        Raises:
            EnvironmentNotSetError: If no source yields a non-empty value
            UnsupportedEnvironmentError: If the value is not a known environment
        """
        found = self.lookup()
        if found is None or not found[0]:
            raise EnvironmentNotSetError(self.name)

        value, source = found
        if value not in Environment.values():
            raise UnsupportedEnvironmentError(value, Environment.values())

        self._logger.debug(f"Resolved {self.name}={value!r} from {source}")
        return Environment(value)
