"""Dependency entry and analysis result models."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable

DEPENDENCY_TYPES = ("normal", "peer", "optional")


@dataclass(frozen=True)
class DependencyEntry:
    """A single dependency or dependent reported for a package."""

    name: str
    version: str
    type: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Dependency name must be non-empty")
        if self.version is None:
            raise ValueError("Dependency version must be a string")
        if self.type not in DEPENDENCY_TYPES:
            raise ValueError(f"Invalid dependency type: {self.type}")

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "version": self.version,
            "type": self.type,
        }


@dataclass(frozen=True)
class AnalyzeResult:
    """Dependencies, dependents and resolved version of one package."""

    dependencies: tuple[DependencyEntry, ...]
    depended_by: tuple[DependencyEntry, ...]
    version: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "dependencies": [entry.to_dict() for entry in self.dependencies],
            "dependedBy": [entry.to_dict() for entry in self.depended_by],
            "version": self.version,
        }

    def dependencies_of_type(self, dep_type: str) -> list[DependencyEntry]:
        return [entry for entry in self.dependencies if entry.type == dep_type]

    def dependents_of_type(self, dep_type: str) -> list[DependencyEntry]:
        return [entry for entry in self.depended_by if entry.type == dep_type]

    @classmethod
    def from_entries(
        cls,
        *,
        dependencies: Iterable[DependencyEntry],
        depended_by: Iterable[DependencyEntry],
        version: str | None = None,
    ) -> AnalyzeResult:
        return cls(
            dependencies=tuple(dependencies),
            depended_by=tuple(depended_by),
            version=version,
        )
