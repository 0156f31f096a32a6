"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from pkg_deps.errors import ConfigError
from pkg_deps.settings import load_settings, parse_log_level


def test_defaults():
    settings = load_settings({})

    assert settings.lockfile == Path("pnpm-lock.yaml")
    assert settings.log_level == "WARNING"
    assert settings.color is True


def test_environment_overrides():
    settings = load_settings(
        {
            "PKG_DEPS_LOCKFILE": "web/pnpm-lock.yaml",
            "PKG_DEPS_LOG_LEVEL": "debug",
            "PKG_DEPS_NO_COLOR": "1",
        }
    )

    assert settings.lockfile == Path("web/pnpm-lock.yaml")
    assert settings.log_level == "DEBUG"
    assert settings.color is False


def test_no_color_convention():
    assert load_settings({"NO_COLOR": "1"}).color is False
    assert load_settings({"NO_COLOR": ""}).color is True


def test_invalid_log_level():
    with pytest.raises(ConfigError, match="Invalid log level"):
        load_settings({"PKG_DEPS_LOG_LEVEL": "chatty"})


def test_parse_log_level_normalises_case():
    assert parse_log_level(" info ") == "INFO"
