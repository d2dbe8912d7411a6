"""CLI commands."""

from .env import env

__all__ = ["env"]
