"""Analyzer registry keyed by lockfile name.

Each supported lockfile format registers an analyzer class here. Adding a
format means writing a new analyzer and listing it in ``ANALYZERS``.
"""

from __future__ import annotations

from pathlib import Path
from collections.abc import Callable
from typing import TypeAlias

from ..errors import UnsupportedFormatError
from .base import LockfileAnalyzer
from .pnpm import PnpmAnalyzer

AnalyzerFactory: TypeAlias = Callable[[Path], LockfileAnalyzer]

ANALYZERS: dict[str, AnalyzerFactory] = {
    PnpmAnalyzer.lockfile_name: PnpmAnalyzer,
}


def get_supported_lockfiles() -> list[str]:
    """Return a sorted list of lockfile names with a registered analyzer."""
    return sorted(ANALYZERS.keys())


def create_analyzer(lockfile_path: Path | str) -> LockfileAnalyzer:
    """Return an analyzer for ``lockfile_path`` selected by its file name.

    Raises:
        UnsupportedFormatError: If no analyzer handles the file name.
    """
    path = Path(lockfile_path)
    factory = ANALYZERS.get(path.name)
    if factory is None:
        known = ", ".join(get_supported_lockfiles())
        raise UnsupportedFormatError(
            f"Unsupported lockfile type: {path.name}. Supported lockfiles: {known}"
        )
    return factory(path)


__all__ = [
    "ANALYZERS",
    "LockfileAnalyzer",
    "PnpmAnalyzer",
    "create_analyzer",
    "get_supported_lockfiles",
]
