"""Environment detection - constants, resolution and the process guard."""

from .constants import ConstantRegistry, process_constants
from .guard import EnvironmentGuard
from .resolver import EnvironmentResolver, ValueSource, argument_prefix

__all__ = [
    "ConstantRegistry",
    "EnvironmentGuard",
    "EnvironmentResolver",
    "ValueSource",
    "argument_prefix",
    "process_constants",
]
