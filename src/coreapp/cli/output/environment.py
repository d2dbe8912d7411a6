"""Environment display functions for CLI."""

import typer

from ...domain.exceptions import CoreAppError
from ...environment.guard import EnvironmentGuard


def display_environment(guard: EnvironmentGuard) -> None:
    """Display the resolved environment and root directory.

    Args:
        guard: Initialized environment guard
    """
    typer.secho(f"✓ Environment: {guard.environment}", fg=typer.colors.GREEN)
    typer.echo(f"  Root: {guard.root_dir}")


def display_error(error: CoreAppError) -> None:
    """Display a bootstrap error.

    Args:
        error: Error raised while constructing the guard
    """
    typer.secho(f"✗ {error}", fg=typer.colors.RED)
