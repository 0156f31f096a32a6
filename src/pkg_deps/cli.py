"""CLI entrypoint: analyze package dependencies and dependents in a lockfile.

Usage:
  pkg-deps [--file PATH] [--trace] [--json] PACKAGE [PACKAGE ...]

Package arguments accept shell-style wildcards, e.g. ``@types/*``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console

from . import __version__
from .analyzers import create_analyzer
from .errors import AnalyzerError, ConfigError, UnsupportedFormatError
from .formatter import OutputFormatter
from .matching import match_package_names
from .models import AnalyzeResult, DependencyChainNode
from .report import aggregate
from .settings import Settings, load_settings, parse_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _log_level(value: str) -> str:
    try:
        return parse_log_level(value)
    except ConfigError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    settings = settings or load_settings()
    parser = argparse.ArgumentParser(
        prog="pkg-deps",
        description="Analyze package dependencies and dependents",
    )
    parser.add_argument(
        "packages",
        nargs="+",
        metavar="PACKAGE",
        help="Package name (supports wildcards, e.g. @types/*)",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=settings.lockfile,
        help="Lockfile path (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--trace",
        action="store_true",
        help="Show complete dependency chains",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of text",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=settings.color,
        help="Disable colored output",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _error(message: str, color: bool) -> None:
    if color:
        message = f"{Fore.RED}{message}{Style.RESET_ALL}"
    print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ConfigError as exc:
        _error(f"Error: {exc}", color=False)
        return 1

    args = parse_args(argv, settings)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    if args.color:
        just_fix_windows_console()

    lockfile_path = (Path.cwd() / args.file).resolve()
    if not lockfile_path.exists():
        _error(f"Error: Lockfile not found: {lockfile_path}", args.color)
        return 1

    try:
        analyzer = create_analyzer(lockfile_path)
    except UnsupportedFormatError as exc:
        _error(f"Error: {exc}", args.color)
        return 1

    try:
        analyzer.init()
        available = analyzer.get_all_package_names()
        matched = match_package_names(available, args.packages)
        if not matched:
            _error("Error: No matching packages found", args.color)
            return 1
        logger.info("Matched %d package(s) in %s", len(matched), lockfile_path)

        results: dict[str, AnalyzeResult] = {}
        chains: dict[str, list[DependencyChainNode]] = {}
        for name in matched:
            results[name] = analyzer.analyze(name)
            if args.trace:
                chains[name] = analyzer.trace_dependency_nodes(name)
    except AnalyzerError as exc:
        _error(f"Analysis failed: {exc}", args.color)
        return 1

    if args.json:
        report = aggregate(lockfile_path, results, chains if args.trace else None)
        print(json.dumps(report, indent=2, ensure_ascii=False))
        return 0

    formatter = OutputFormatter(color=args.color)
    for name, result in results.items():
        print(formatter.format(name, result))
        if args.trace:
            print("\n".join(formatter.format_dependency_chains(name, chains[name])))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
