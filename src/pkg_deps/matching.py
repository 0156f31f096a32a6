"""Wildcard package name matching."""

from __future__ import annotations

from fnmatch import fnmatchcase
from collections.abc import Iterable


def match_package_names(available: Iterable[str], patterns: Iterable[str]) -> list[str]:
    """Return names from ``available`` matching any of ``patterns``.

    Patterns use shell-style wildcards (``@types/*``, ``react-*``). Results
    follow pattern order, then the order of ``available``; repeats are dropped.
    """
    names = list(available)
    matched: dict[str, None] = {}
    for pattern in patterns:
        for name in names:
            if fnmatchcase(name, pattern):
                matched.setdefault(name, None)
    return list(matched)
