"""pkg-deps core package.

Inspects a pnpm lockfile and reports what a package depends on and which
packages depend on it. The analyzers are usable from the ``pkg-deps`` CLI or
directly as a library.
"""

__version__ = "1.0.0"

__all__ = [
    "analyzers",
    "cli",
]
