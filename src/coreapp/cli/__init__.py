"""Command line interface."""

from .app import create_cli_app, main

__all__ = ["create_cli_app", "main"]
