"""Process-wide named constants.

A constant can be defined once and read for the rest of the process. There
is no way to undefine or change one through this API; tests that need a
clean slate either inject their own `ConstantRegistry` or use
`coreapp.testing.reset_process_state`.
"""

import typing as t

from ..domain.exceptions import ConstantConflictError
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


class ConstantRegistry:
    """Define-once store of named string constants."""

    def __init__(self, logger: "loguru.Logger" = get_logger(__name__)) -> None:
        self._values: dict[str, str] = {}
        self._logger = logger

    def is_defined(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str) -> str | None:
        """Return the constant's value, or None if it is not defined."""
        return self._values.get(name)

    def define(self, name: str, value: str) -> None:
        """Define a constant.

        Defining a constant again with the same value is a no-op.

        Raises:
            ConstantConflictError: If the constant already holds another value
        """
        if name in self._values:
            existing = self._values[name]
            if existing != value:
                raise ConstantConflictError(name, existing)
            return
        self._values[name] = value
        self._logger.debug(f"Defined process constant {name}={value!r}")

    def clear(self) -> None:
        """Forget every constant.

        Test isolation only; production code never calls this.
        """
        self._values.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._values


# The registry shared by everything in this process.
process_constants = ConstantRegistry()
