"""
rewrite-report CLI

Entry point: environment loading, argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

from __future__ import annotations

import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from rewrite_report import __version__


def _load_environment(env_file: Path | None = None) -> None:
    """Load .env (cwd by default); values already exported in the shell win."""
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)


def main(argv: list[str] | None = None) -> int:
    from cli.wiring import build_parser, dispatch_command

    _load_environment()
    parser = build_parser(version=__version__)
    args = parser.parse_args(argv)
    return dispatch_command(parser, args)


if __name__ == "__main__":
    sys.exit(main())
