"""Shared fixtures: write pnpm lockfiles to a temporary directory."""

from pathlib import Path

import pytest
import yaml

from pkg_deps.analyzers import PnpmAnalyzer


@pytest.fixture
def write_lockfile(tmp_path):
    """Write a document (dict or raw YAML text) as pnpm-lock.yaml."""

    def _write(document, name: str = "pnpm-lock.yaml") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_analyzer(write_lockfile):
    """Return an initialised PnpmAnalyzer over the given document."""

    def _make(document) -> PnpmAnalyzer:
        analyzer = PnpmAnalyzer(write_lockfile(document))
        analyzer.init()
        return analyzer

    return _make
