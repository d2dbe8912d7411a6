"""Tests for Settings configuration helpers."""

import pytest
from pydantic import ValidationError

from coreapp.config.settings import LogLevel, Settings, build_settings
from coreapp.domain.environment import Environment


@pytest.fixture
def default_settings():
    """Provide default Settings for comparison."""
    return Settings()


class TestSettings:
    def test_defaults(self, default_settings):
        assert default_settings.environment_name == "APPLICATION_ENV"
        assert default_settings.log_level == LogLevel.INFO
        assert default_settings.environment is None

    def test_string_values_coerced(self):
        settings = Settings(log_level="DEBUG", environment="staging")

        assert settings.log_level is LogLevel.DEBUG
        assert settings.environment is Environment.STAGING

    def test_frozen(self, default_settings):
        with pytest.raises(ValidationError):
            default_settings.log_level = LogLevel.DEBUG

    def test_rejects_unknown_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="bogus")

    def test_rejects_empty_environment_name(self):
        with pytest.raises(ValidationError):
            Settings(environment_name="")


class TestBuildSettings:
    """Test our build_settings helper logic."""

    def test_filters_none_values(self, default_settings):
        """build_settings ignores None overrides."""
        settings = build_settings(
            environment_name=None,
            log_level=LogLevel.DEBUG,
        )

        assert settings.environment_name == default_settings.environment_name
        assert settings.log_level == LogLevel.DEBUG

    def test_applies_all_overrides(self):
        """build_settings applies all non-None overrides."""
        settings = build_settings(
            environment_name="APP_STAGE",
            log_level=LogLevel.ERROR,
            environment=Environment.PRODUCTION,
        )

        assert settings.environment_name == "APP_STAGE"
        assert settings.log_level == LogLevel.ERROR
        assert settings.environment == Environment.PRODUCTION
