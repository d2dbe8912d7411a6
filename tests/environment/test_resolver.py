"""Tests for environment value resolution priority and validation."""

import pytest

from coreapp.domain.environment import Environment
from coreapp.domain.exceptions import (
    EnvironmentNotSetError,
    UnsupportedEnvironmentError,
)
from coreapp.environment.resolver import (
    EnvironmentResolver,
    ValueSource,
    argument_prefix,
)


@pytest.fixture
def make_resolver(constants, mock_logger):
    def factory(argv=None, environ=None) -> EnvironmentResolver:
        return EnvironmentResolver(
            "APPLICATION_ENV",
            argv=argv,
            constants=constants,
            environ=environ or {},
            logger=mock_logger,
        )

    return factory


def test_argument_prefix():
    assert argument_prefix("APPLICATION_ENV") == "-eAPPLICATION_ENV="


class TestLookup:
    """Test source priority."""

    def test_argv_wins_over_everything(self, make_resolver, constants):
        constants.define("APPLICATION_ENV", "staging")
        resolver = make_resolver(
            argv=["app.py", "-eAPPLICATION_ENV=testing"],
            environ={"APPLICATION_ENV": "production"},
        )

        assert resolver.lookup() == ("testing", ValueSource.ARGV)

    def test_first_argv_match_wins(self, make_resolver):
        resolver = make_resolver(
            argv=["-eAPPLICATION_ENV=build", "-eAPPLICATION_ENV=staging"]
        )

        assert resolver.lookup() == ("build", ValueSource.ARGV)

    def test_argv_needs_exact_prefix(self, make_resolver):
        resolver = make_resolver(
            argv=[
                "-e APPLICATION_ENV=testing",
                "--eAPPLICATION_ENV=testing",
                "-eAPPLICATION_ENVX=testing",
                "APPLICATION_ENV=testing",
            ]
        )

        assert resolver.lookup() is None

    def test_constant_wins_over_environ(self, make_resolver, constants):
        constants.define("APPLICATION_ENV", "staging")
        resolver = make_resolver(environ={"APPLICATION_ENV": "production"})

        assert resolver.lookup() == ("staging", ValueSource.CONSTANT)

    def test_environ_used_last(self, make_resolver):
        resolver = make_resolver(argv=[], environ={"APPLICATION_ENV": "staging"})

        assert resolver.lookup() == ("staging", ValueSource.ENVIRON)

    def test_empty_environ_ignored(self, make_resolver):
        resolver = make_resolver(environ={"APPLICATION_ENV": ""})

        assert resolver.lookup() is None

    def test_missing_argv_skipped(self, make_resolver):
        resolver = make_resolver(argv=None, environ={"APPLICATION_ENV": "build"})

        assert resolver.lookup() == ("build", ValueSource.ENVIRON)


class TestResolve:
    def test_resolves_enum(self, make_resolver):
        resolver = make_resolver(argv=["-eAPPLICATION_ENV=testing"])

        assert resolver.resolve() is Environment.TESTING

    def test_nothing_set(self, make_resolver):
        with pytest.raises(EnvironmentNotSetError, match="APPLICATION_ENV not set"):
            make_resolver().resolve()

    def test_empty_argv_value_not_set(self, make_resolver):
        """An empty argv value wins the lookup and then fails validation."""
        resolver = make_resolver(
            argv=["-eAPPLICATION_ENV="], environ={"APPLICATION_ENV": "testing"}
        )

        with pytest.raises(EnvironmentNotSetError):
            resolver.resolve()

    def test_unsupported_value(self, make_resolver):
        resolver = make_resolver(argv=["-eAPPLICATION_ENV=bogus"])

        with pytest.raises(UnsupportedEnvironmentError) as exc_info:
            resolver.resolve()

        assert exc_info.value.value == "bogus"
        assert "production" in exc_info.value.allowed

    def test_values_are_case_sensitive(self, make_resolver):
        resolver = make_resolver(argv=["-eAPPLICATION_ENV=Testing"])

        with pytest.raises(UnsupportedEnvironmentError):
            resolver.resolve()

    def test_logs_source(self, make_resolver, mock_logger):
        make_resolver(environ={"APPLICATION_ENV": "staging"}).resolve()

        message = mock_logger.debug.call_args.args[0]
        assert "staging" in message
        assert "environ" in message
