"""Test-only helpers for resetting process-wide state.

Nothing in here is safe to call from production code: it drops the live
EnvironmentGuard and forgets every process constant.
"""

from .environment.constants import process_constants
from .environment.guard import EnvironmentGuard


def reset_process_state() -> None:
    """Clear the live guard and all process constants."""
    EnvironmentGuard.reset_instance()
    process_constants.clear()
