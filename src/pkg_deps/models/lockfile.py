"""Typed records for a decoded pnpm lockfile."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

# Lockfile section name -> record attribute
DEPENDENCY_SECTIONS = {
    "dependencies": "dependencies",
    "devDependencies": "dev_dependencies",
    "peerDependencies": "peer_dependencies",
    "optionalDependencies": "optional_dependencies",
}


def _coerce_dependency_map(key: str, section: str, value: Any) -> dict[str, str]:
    """Return ``value`` as a name -> range mapping, dropping anything unusable."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        logger.warning("Ignoring non-mapping '%s' section in entry %s", section, key)
        return {}

    deps: dict[str, str] = {}
    for name, version in value.items():
        if name is None or name == "":
            continue
        deps[str(name)] = "" if version is None else str(version)
    return deps


def _coerce_entry(key: str, data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        logger.warning("Ignoring malformed lockfile entry %s", key)
        return {}
    return data


@dataclass(frozen=True)
class SnapshotRecord:
    """Resolved dependency set of one resolved package instance."""

    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)
    peer_dependencies: Mapping[str, str] = field(default_factory=dict)
    optional_dependencies: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def _section_kwargs(cls, key: str, data: Mapping[str, Any]) -> dict[str, dict[str, str]]:
        return {
            attr: _coerce_dependency_map(key, section, data.get(section))
            for section, attr in DEPENDENCY_SECTIONS.items()
        }

    @classmethod
    def from_dict(cls, key: str, data: Any) -> SnapshotRecord:
        entry = _coerce_entry(key, data)
        return cls(**cls._section_kwargs(key, entry))


@dataclass(frozen=True)
class PackageRecord(SnapshotRecord):
    """Declared metadata of one ``packages`` entry."""

    version: str = ""

    @classmethod
    def from_dict(cls, key: str, data: Any) -> PackageRecord:
        entry = _coerce_entry(key, data)
        version = entry.get("version")
        return cls(
            version="" if version is None else str(version),
            **cls._section_kwargs(key, entry),
        )


@dataclass(frozen=True)
class PnpmLockfile:
    """Immutable tables decoded from a pnpm lockfile."""

    lockfile_version: str | None
    packages: Mapping[str, PackageRecord]
    snapshots: Mapping[str, SnapshotRecord]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PnpmLockfile:
        """Build typed tables from a structurally valid document."""
        raw_version = data.get("lockfileVersion")
        packages = {
            str(key): PackageRecord.from_dict(str(key), entry)
            for key, entry in (data.get("packages") or {}).items()
        }
        snapshots = {
            str(key): SnapshotRecord.from_dict(str(key), entry)
            for key, entry in (data.get("snapshots") or {}).items()
        }
        return cls(
            lockfile_version=None if raw_version is None else str(raw_version),
            packages=packages,
            snapshots=snapshots,
        )
