"""Data models for lockfile analysis."""

from __future__ import annotations

from .chain import DependencyChainNode, chain_leaves
from .dependency import DEPENDENCY_TYPES, AnalyzeResult, DependencyEntry
from .lockfile import PackageRecord, PnpmLockfile, SnapshotRecord

__all__ = [
    "DEPENDENCY_TYPES",
    "AnalyzeResult",
    "DependencyChainNode",
    "DependencyEntry",
    "PackageRecord",
    "PnpmLockfile",
    "SnapshotRecord",
    "chain_leaves",
]
