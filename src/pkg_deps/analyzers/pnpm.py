"""Dependency and dependent resolution over a decoded pnpm lockfile."""

from __future__ import annotations

import logging
from pathlib import Path
from collections.abc import Mapping

from ..errors import NotInitializedError
from ..models import (
    AnalyzeResult,
    DependencyChainNode,
    DependencyEntry,
    PackageRecord,
    PnpmLockfile,
    SnapshotRecord,
)
from ..parsers.pnpm_lock import PackagePath, load_lockfile, parse_package_path

logger = logging.getLogger(__name__)


def _add_dependencies_by_type(
    deps: Mapping[str, str],
    dep_type: str,
    target: list[DependencyEntry],
) -> None:
    """Append entries for ``deps`` unless a dependency of the same name exists."""
    seen = {entry.name for entry in target}
    for name, version in deps.items():
        if name in seen:
            continue
        target.append(DependencyEntry(name=name, version=version, type=dep_type))
        seen.add(name)


def _dependency_type_of(record: SnapshotRecord, package_name: str) -> str | None:
    """Return the first category of ``record`` that lists ``package_name``."""
    if package_name in record.dependencies:
        return "normal"
    if package_name in record.peer_dependencies:
        return "peer"
    if package_name in record.optional_dependencies:
        return "optional"
    return None


class PnpmAnalyzer:
    """Answer dependency questions against a ``pnpm-lock.yaml`` file."""

    lockfile_name = "pnpm-lock.yaml"

    def __init__(self, lockfile_path: Path | str) -> None:
        self.lockfile_path = Path(lockfile_path)
        self._lockfile: PnpmLockfile | None = None
        self._packages: list[tuple[PackagePath, PackageRecord]] = []
        self._snapshots: list[tuple[PackagePath, SnapshotRecord]] = []

    @property
    def is_initialized(self) -> bool:
        return self._lockfile is not None

    @property
    def lockfile(self) -> PnpmLockfile:
        return self._require_lockfile()

    def init(self) -> None:
        """Load and decode the lockfile.

        Raises:
            InitializationError: If the lockfile cannot be read or decoded.
        """
        lockfile = load_lockfile(self.lockfile_path)
        self._packages = [
            (parse_package_path(key), record) for key, record in lockfile.packages.items()
        ]
        self._snapshots = [
            (parse_package_path(key), record) for key, record in lockfile.snapshots.items()
        ]
        self._lockfile = lockfile
        logger.debug("Initialised analyzer for %s", self.lockfile_path)

    def _require_lockfile(self) -> PnpmLockfile:
        if self._lockfile is None:
            raise NotInitializedError("Lockfile not initialized")
        return self._lockfile

    def _find_base_package(self, package_name: str) -> tuple[PackagePath, PackageRecord] | None:
        for pkg, record in self._packages:
            if pkg.name == package_name and "(" not in pkg.path:
                return pkg, record
        return None

    def _find_dependents(self, package_name: str) -> list[DependencyEntry]:
        dependents: list[DependencyEntry] = []

        for pkg, record in self._packages:
            if not pkg.name or pkg.name == package_name:
                continue
            dep_type = _dependency_type_of(record, package_name)
            if dep_type is not None:
                dependents.append(
                    DependencyEntry(
                        name=pkg.name,
                        version=pkg.version or record.version,
                        type=dep_type,
                    )
                )

        for pkg, snapshot in self._snapshots:
            if not pkg.name or pkg.name == package_name:
                continue
            dep_type = _dependency_type_of(snapshot, package_name)
            if dep_type is not None:
                dependents.append(DependencyEntry(name=pkg.name, version=pkg.version, type=dep_type))

        return dependents

    def analyze(self, package_name: str) -> AnalyzeResult:
        """Collect dependencies and dependents of ``package_name``.

        Unknown names return empty results with ``version`` set to None.
        """
        lockfile = self._require_lockfile()
        dependencies: list[DependencyEntry] = []
        target_version: str | None = None

        base = self._find_base_package(package_name)
        if base is not None:
            pkg, record = base
            target_version = pkg.version
            _add_dependencies_by_type(record.dependencies, "normal", dependencies)
            _add_dependencies_by_type(record.peer_dependencies, "peer", dependencies)
            _add_dependencies_by_type(record.optional_dependencies, "optional", dependencies)

        if target_version is not None:
            snapshot = lockfile.snapshots.get(f"{package_name}@{target_version}")
            if snapshot is not None:
                # Peers are only taken from the base package record
                _add_dependencies_by_type(snapshot.dependencies, "normal", dependencies)
                _add_dependencies_by_type(snapshot.optional_dependencies, "optional", dependencies)

        depended_by = self._find_dependents(package_name)
        logger.debug(
            "Analyzed %s@%s: %d dependencies, %d dependents",
            package_name,
            target_version,
            len(dependencies),
            len(depended_by),
        )
        return AnalyzeResult.from_entries(
            dependencies=dependencies,
            depended_by=depended_by,
            version=target_version,
        )

    def trace_dependency_nodes(self, package_name: str) -> list[DependencyChainNode]:
        """Walk dependents of ``package_name`` transitively, depth first.

        Every created node is returned in creation order. A name is expanded
        at most once per call, which also terminates dependency cycles.
        """
        self._require_lockfile()
        visited: set[str] = set()
        nodes: list[DependencyChainNode] = []
        stack: list[tuple[str, DependencyChainNode | None]] = [(package_name, None)]

        while stack:
            name, parent = stack.pop()
            if name in visited:
                continue
            visited.add(name)

            children = [
                DependencyChainNode(
                    name=entry.name,
                    version=entry.version,
                    type=entry.type,
                    parent=parent,
                )
                for entry in self._find_dependents(name)
            ]
            nodes.extend(children)
            stack.extend((child.name, child) for child in reversed(children))

        logger.debug("Traced %s: %d chain nodes, %d names", package_name, len(nodes), len(visited))
        return nodes

    def trace_dependency_chain(self, package_name: str) -> list[DependencyChainNode]:
        """Return the root nodes (direct dependents) of the dependent chains."""
        return [node for node in self.trace_dependency_nodes(package_name) if node.is_root]

    def get_all_package_names(self) -> list[str]:
        """Return the distinct package names in the ``packages`` table."""
        self._require_lockfile()
        names: dict[str, None] = {}
        for pkg, _record in self._packages:
            if pkg.name:
                names.setdefault(pkg.name, None)
        return list(names)
