"""Unit tests for monthspan.config."""

import logging

import pytest

from monthspan import config

# pylint: disable=magic-value-comparison


class TestGetLogLevel:
    """Tests for get_log_level."""

    @staticmethod
    def test_default(clean_env: pytest.MonkeyPatch) -> None:
        """Unset means WARNING."""
        assert config.get_log_level() == logging.WARNING

    @staticmethod
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            (" Error ", logging.ERROR),
            ("WARN", logging.WARNING),
            ("", logging.WARNING),
        ],
    )
    def test_named_levels(
        clean_env: pytest.MonkeyPatch, value: str, expected: int
    ) -> None:
        """Level names are case-insensitive and surrounding spaces are ignored."""
        clean_env.setenv(config.LOG_LEVEL_ENV, value)
        assert config.get_log_level() == expected

    @staticmethod
    def test_invalid(clean_env: pytest.MonkeyPatch) -> None:
        """Unknown names raise InvalidLogLevelError, a ValueError."""
        clean_env.setenv(config.LOG_LEVEL_ENV, "LOUD")
        with pytest.raises(config.InvalidLogLevelError) as exc_info:
            config.get_log_level()
        assert exc_info.value.value == "LOUD"
        assert isinstance(exc_info.value, ValueError)
        assert config.LOG_LEVEL_ENV in str(exc_info.value)


class TestFlags:
    """Tests for the boolean environment flags."""

    @staticmethod
    def test_debug_mode(clean_env: pytest.MonkeyPatch) -> None:
        """Debug mode is on for any non-empty value."""
        assert config.get_debug_mode() is False
        clean_env.setenv(config.DEBUG_ENV, "1")
        assert config.get_debug_mode() is True
        clean_env.setenv(config.DEBUG_ENV, "")
        assert config.get_debug_mode() is False

    @staticmethod
    def test_color(clean_env: pytest.MonkeyPatch) -> None:
        """NO_COLOR with any non-empty value disables color."""
        assert config.get_color_enabled() is True
        clean_env.setenv(config.NO_COLOR_ENV, "1")
        assert config.get_color_enabled() is False
