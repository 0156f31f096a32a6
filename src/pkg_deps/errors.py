"""Error hierarchy shared by the decoder, analyzers and CLI."""

from __future__ import annotations


class AnalyzerError(RuntimeError):
    """Base error for lockfile analysis failures."""


class InitializationError(AnalyzerError):
    """Raised when a lockfile cannot be read or is structurally invalid."""


class NotInitializedError(AnalyzerError):
    """Raised when an analyzer is queried before ``init()`` succeeded."""


class UnsupportedFormatError(AnalyzerError, ValueError):
    """Raised when no analyzer is registered for a lockfile name."""


class ConfigError(AnalyzerError):
    """Raised when an environment setting holds an invalid value."""
