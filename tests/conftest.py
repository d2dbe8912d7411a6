"""Pytest configuration and fixtures for coreapp tests."""

import loguru
import pytest
from typer.testing import CliRunner

from coreapp.cli.app import create_cli_app
from coreapp.cli.state import CLIState
from coreapp.config.settings import LogLevel, Settings
from coreapp.domain.environment import Environment
from coreapp.environment import ConstantRegistry, EnvironmentGuard
from coreapp.infrastructure.logging import reset_logging
from coreapp.testing import reset_process_state


@pytest.fixture(autouse=True)
def clean_process_state():
    """Clear the live guard and process constants around every test."""
    reset_process_state()
    yield
    reset_process_state()


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def constants(mock_logger):
    """Provide an empty constant registry isolated from the process one."""
    return ConstantRegistry(logger=mock_logger)


@pytest.fixture
def root_dir(tmp_path):
    """Provide an existing application root directory."""
    return tmp_path


@pytest.fixture
def make_guard(root_dir, constants, mock_logger):
    """Build guards with isolated sources; override any source per call."""

    def factory(**kwargs) -> EnvironmentGuard:
        kwargs.setdefault("argv", [])
        kwargs.setdefault("environ", {})
        kwargs.setdefault("constants", constants)
        kwargs.setdefault("logger", mock_logger)
        return EnvironmentGuard(kwargs.pop("root_dir", root_dir), **kwargs)

    return factory


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_state(test_settings, constants):
    """CLIState with an empty environment and isolated constants."""
    return CLIState(test_settings, environ={}, constants=constants)


@pytest.fixture
def test_cli_app(cli_state):
    """Provide CLI app with isolated state injected."""
    return create_cli_app(state=cli_state)


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
