"""Report aggregation and JSON-friendly output."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Mapping, Sequence
from typing import Any

from .models import AnalyzeResult, DependencyChainNode, chain_leaves


def aggregate(
    lockfile: Path | str,
    results: Mapping[str, AnalyzeResult],
    chains: Mapping[str, Sequence[DependencyChainNode]] | None = None,
) -> dict[str, Any]:
    """Aggregate per-package results into a single report.

    ``results`` maps each analysed package name to its result. When
    ``chains`` is given, each package entry gains a ``chains`` list; every
    chain lists nodes from the outermost dependent down to the direct one.
    """
    packages: list[dict[str, Any]] = []
    for name, result in results.items():
        entry: dict[str, Any] = {"name": name, **result.to_dict()}
        if chains is not None:
            entry["chains"] = [
                [node.to_dict() for node in reversed(leaf.chain())]
                for leaf in chain_leaves(chains.get(name, []))
            ]
        packages.append(entry)

    report: dict[str, Any] = {
        "version": "1",  # report schema version
        "lockfile": str(lockfile),
        "packages": packages,
        "totals": {
            "packages": len(packages),
            "dependencies": sum(len(r.dependencies) for r in results.values()),
            "dependedBy": sum(len(r.depended_by) for r in results.values()),
        },
    }

    return report
