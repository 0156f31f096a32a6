"""Decode pnpm-lock.yaml into typed package and snapshot tables."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Iterable
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from ..errors import InitializationError
from ..models import PnpmLockfile

logger = logging.getLogger(__name__)

# Keys look like "/name@1.2.3", "@scope/name@1.2.3" or "name@1.2.3(peer@2.0.0)"
_QUALIFIED_KEY = re.compile(r"^(.+?)@([^(]+)\((.*?)\)$")
_PLAIN_KEY = re.compile(r"^(.+?)@([^(]+)$")

DOCUMENT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "lockfileVersion": {"type": ["number", "string"]},
        "packages": {"type": ["object", "null"]},
        "snapshots": {"type": ["object", "null"]},
    },
}

_VALIDATOR = Draft202012Validator(DOCUMENT_SCHEMA)


@dataclass(frozen=True)
class PackagePath:
    """Name and version extracted from a lockfile package key."""

    name: str
    version: str
    path: str


def parse_package_path(key: str) -> PackagePath:
    """Split a package key into name and version.

    A peer qualifier stays attached to the version, so
    ``unbuild@2.0.0(typescript@5.7.2)`` yields version
    ``2.0.0(typescript@5.7.2)``. Keys without a ``name@version`` shape return
    the whole key as the name and an empty version.
    """
    clean = key[1:] if key.startswith("/") else key

    match = _QUALIFIED_KEY.match(clean)
    if match:
        name, version, qualifier = match.groups()
        return PackagePath(name=name, version=f"{version}({qualifier})", path=clean)

    match = _PLAIN_KEY.match(clean)
    if match:
        name, version = match.groups()
        return PackagePath(name=name, version=version, path=clean)

    return PackagePath(name=clean, version="", path=clean)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def decode(data: Any) -> PnpmLockfile:
    """Validate a parsed document and build the typed lockfile tables.

    Raises:
        InitializationError: If the document is empty or its top-level
            structure is invalid.
    """
    if data is None:
        raise InitializationError("Lockfile is empty")

    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise InitializationError("Invalid lockfile structure:\n" + _format_errors(errors))

    lockfile = PnpmLockfile.from_dict(data)
    logger.debug(
        "Decoded lockfile v%s: %d packages, %d snapshots",
        lockfile.lockfile_version,
        len(lockfile.packages),
        len(lockfile.snapshots),
    )
    return lockfile


def load_lockfile(path: Path | str) -> PnpmLockfile:
    """Read and decode a pnpm lockfile.

    Raises:
        InitializationError: If the file is missing, unreadable, not valid
            YAML or structurally invalid.
    """
    lockfile_path = Path(path)

    try:
        content = lockfile_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InitializationError(f"Failed to read lockfile {lockfile_path}: {exc}") from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise InitializationError(f"Invalid YAML in lockfile {lockfile_path}: {exc}") from exc

    return decode(data)
