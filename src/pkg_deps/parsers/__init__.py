"""Lockfile decoders."""

from .pnpm_lock import PackagePath, decode, load_lockfile, parse_package_path

__all__ = [
    "PackagePath",
    "decode",
    "load_lockfile",
    "parse_package_path",
]
