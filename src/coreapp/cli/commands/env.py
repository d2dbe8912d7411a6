"""Env command implementation."""

from pathlib import Path
from typing import Optional

import typer

from ...domain.exceptions import CoreAppError
from ...environment.guard import EnvironmentGuard
from ...environment.resolver import argument_prefix
from ..output.environment import display_environment, display_error
from ..state import CLIState


def build_argv(settings_args: list[str]) -> list[str]:
    """Rebuild ``-e<NAME>=<value>`` arguments from parsed ``-e`` option values."""
    return [f"-e{value}" for value in settings_args]


def env(
    ctx: typer.Context,
    root_dir: Path = typer.Argument(..., help="Application root directory"),
    settings_args: Optional[list[str]] = typer.Option(
        None,
        "-e",
        help="Setting as NAME=value, e.g. -eAPPLICATION_ENV=testing",
    ),
) -> None:
    """Resolve and validate the application environment.

    Examples:
        coreapp env /srv/app
        coreapp env /srv/app -eAPPLICATION_ENV=staging
        APPLICATION_ENV=production coreapp env .
    """
    state: CLIState = ctx.obj
    name = state.settings.environment_name

    argv = build_argv(settings_args or [])
    for value in argv:
        if not value.startswith(argument_prefix(name)):
            typer.secho(
                f"Warning: ignoring unknown setting {value}", fg=typer.colors.YELLOW
            )

    try:
        guard = EnvironmentGuard(
            root_dir,
            argv=argv,
            environ=state.environ,
            constants=state.constants,
            name=name,
        )
    except CoreAppError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_environment(guard)
