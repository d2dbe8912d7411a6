"""CLI state container."""

from collections.abc import Mapping

from ..config.settings import Settings
from ..environment.constants import ConstantRegistry


class CLIState:
    """Application state container for CLI commands.

    Holds Settings plus the process sources the guard reads from, so tests
    can swap in their own environment and constant registry.
    """

    def __init__(
        self,
        settings: Settings,
        environ: Mapping[str, str] | None = None,
        constants: ConstantRegistry | None = None,
    ):
        self.settings = settings
        self.environ = environ
        self.constants = constants
