"""CLI command dispatch wiring."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from cli import handlers


def dispatch_command(parser: argparse.ArgumentParser, args: Any) -> int:
    """Dispatch parsed CLI args to the matching command handler."""
    from cli.orchestration.logging import configure_cli_logging

    quiet = getattr(args, "quiet", False)
    verbose = getattr(args, "verbose", False)
    configure_cli_logging(quiet=quiet, verbose=verbose)

    if args.command is None:
        return handlers.handle_help(parser)

    dispatch: dict[str, Callable[[], int]] = {
        "help": lambda: handlers.handle_help(parser),
        "dry-run": lambda: handlers.handle_dry_run(args),
        "run": lambda: handlers.handle_run(args),
        "build-root": lambda: handlers.handle_build_root(args),
    }
    if args.command in dispatch:
        return dispatch[args.command]()
    parser.print_help()
    return 1
