"""Structural interface shared by lockfile analyzers."""

from __future__ import annotations

from typing import Protocol

from ..models import AnalyzeResult, DependencyChainNode


class LockfileAnalyzer(Protocol):
    """Capabilities every lockfile analyzer provides."""

    lockfile_name: str

    def init(self) -> None:
        ...

    def analyze(self, package_name: str) -> AnalyzeResult:
        ...

    def get_all_package_names(self) -> list[str]:
        ...

    def trace_dependency_chain(self, package_name: str) -> list[DependencyChainNode]:
        ...

    def trace_dependency_nodes(self, package_name: str) -> list[DependencyChainNode]:
        ...
