"""Runtime settings resolved from the environment.

Values are read from environment variables and fall back to defaults.
Command line flags take precedence over both; the CLI applies them on top of
the loaded ``Settings``.

Recognised variables:

- ``PKG_DEPS_LOCKFILE``: default lockfile path (``./pnpm-lock.yaml``)
- ``PKG_DEPS_LOG_LEVEL``: logging level name (``WARNING``)
- ``PKG_DEPS_NO_COLOR`` / ``NO_COLOR``: disable colored output when set
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Mapping

from .errors import ConfigError

DEFAULT_LOCKFILE = Path("pnpm-lock.yaml")
DEFAULT_LOG_LEVEL = "WARNING"

LOCKFILE_ENV_VAR = "PKG_DEPS_LOCKFILE"
LOG_LEVEL_ENV_VAR = "PKG_DEPS_LOG_LEVEL"
NO_COLOR_ENV_VARS = ("PKG_DEPS_NO_COLOR", "NO_COLOR")

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    lockfile: Path
    log_level: str
    color: bool


def parse_log_level(value: str) -> str:
    """Return the normalised level name or raise ConfigError."""
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        known = ", ".join(_LOG_LEVELS)
        raise ConfigError(f"Invalid log level '{value}'. Known levels: {known}")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    lockfile = env.get(LOCKFILE_ENV_VAR, "").strip()
    log_level = env.get(LOG_LEVEL_ENV_VAR, "").strip()
    no_color = any(env.get(name, "") != "" for name in NO_COLOR_ENV_VARS)

    return Settings(
        lockfile=Path(lockfile) if lockfile else DEFAULT_LOCKFILE,
        log_level=parse_log_level(log_level) if log_level else DEFAULT_LOG_LEVEL,
        color=not no_color,
    )
