"""Tests for analyzer selection by lockfile name."""

import pytest

from pkg_deps.analyzers import PnpmAnalyzer, create_analyzer, get_supported_lockfiles
from pkg_deps.errors import UnsupportedFormatError


def test_pnpm_lockfile_selects_pnpm_analyzer(tmp_path):
    analyzer = create_analyzer(tmp_path / "pnpm-lock.yaml")

    assert isinstance(analyzer, PnpmAnalyzer)
    assert analyzer.lockfile_path == tmp_path / "pnpm-lock.yaml"
    assert not analyzer.is_initialized


def test_accepts_string_paths():
    assert isinstance(create_analyzer("some/dir/pnpm-lock.yaml"), PnpmAnalyzer)


@pytest.mark.parametrize("name", ["package-lock.json", "yarn.lock", "PNPM-LOCK.YAML", "pnpm-lock.yml"])
def test_other_lockfiles_are_unsupported(tmp_path, name):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        create_analyzer(tmp_path / name)

    assert name in str(excinfo.value)
    assert "pnpm-lock.yaml" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_supported_lockfiles():
    assert get_supported_lockfiles() == ["pnpm-lock.yaml"]
