"""Parser wiring for the rewrite-report entrypoint."""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser(*, version: str) -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    parser = argparse.ArgumentParser(
        prog="rewrite-report",
        description="Classify and report the results of an automated refactoring run",
        epilog="Commands: dry-run | run | build-root. Use rewrite-report help for the overview.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only warnings and errors")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    _add_result_commands(subparsers)

    subparsers.add_parser("help", help="Show command overview")

    return parser


def _add_common(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("manifest", type=Path, help="Run manifest (YAML or JSON) produced by the engine run")
    sub.add_argument("--project", type=Path, default=None, help="Directory holding pyproject.toml config (default: manifest dir)")
    sub.add_argument("--artifact-cache", type=Path, default=None, help="Shared artifact cache to ignore when resolving the build root")
    sub.add_argument("--active-recipes", type=str, default=None, metavar="NAMES", help="Comma-separated recipe names (overrides config)")
    sub.add_argument("--active-styles", type=str, default=None, metavar="NAMES", help="Comma-separated style names (overrides config)")
    sub.add_argument(
        "--fail-on-invalid-active-recipes",
        action="store_true",
        default=None,
        help="Stop when an active recipe fails validation",
    )


def _add_result_commands(subparsers: argparse._SubParsersAction) -> None:
    dry_run_parser = subparsers.add_parser("dry-run", help="Report changes and write a patch; touch nothing else")
    _add_common(dry_run_parser)
    dry_run_parser.add_argument("--patch-file", type=Path, default=None, help="Patch output (default: target/rewrite/rewrite.patch)")

    run_parser = subparsers.add_parser("run", help="Report changes, write them to disk, remove emptied directories")
    _add_common(run_parser)

    root_parser = subparsers.add_parser("build-root", help="Print the resolved build root and repository root")
    _add_common(root_parser)
