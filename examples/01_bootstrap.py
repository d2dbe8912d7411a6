#!/usr/bin/env python3
"""
01_bootstrap.py - Resolve the environment at startup

Demonstrates: create_app with an environment taken from the command line
Run: python examples/01_bootstrap.py -eAPPLICATION_ENV=development
"""
from pathlib import Path

from coreapp import CoreAppError, EnvironmentGuard, Settings, create_app


def main() -> None:
    """Bootstrap the app from this directory and report the environment."""
    settings = Settings(log_level="DEBUG", environment="development")
    try:
        app = create_app(Path(__file__).parent, settings=settings)
    except CoreAppError as e:
        print(f"Startup failed: {e}")
        print("Pass -eAPPLICATION_ENV=<env> or export APPLICATION_ENV")
        return

    print(f"Environment: {app.environment}")
    print(f"Root: {app.guard.root_dir}")
    # Anywhere else in the process
    print(f"Same guard: {EnvironmentGuard.get_instance() is app.guard}")


if __name__ == "__main__":
    main()
