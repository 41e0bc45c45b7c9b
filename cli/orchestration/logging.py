"""Logging setup for the rewrite-report CLI.

Library modules log under rewrite_report.<area> (results, project, apply,
recipes); CLI code logs under rewrite_report.<name> via get_logger. One
stderr handler on the rewrite_report logger serves all of them.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional

ROOT_LOGGER = "rewrite_report"
LEVEL_ENV = "REWRITE_REPORT_LOG_LEVEL"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_configured = False


def cli_log_level(
    *, quiet: bool = False, verbose: bool = False, environ: Optional[Mapping[str, str]] = None
) -> int:
    """--verbose beats --quiet beats REWRITE_REPORT_LOG_LEVEL; unknown names mean INFO."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    env = os.environ if environ is None else environ
    return _LEVELS.get(env.get(LEVEL_ENV, "").strip().upper(), logging.INFO)


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    global _configured
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(cli_log_level(quiet=quiet, verbose=verbose))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        # rewrite-report output must not be duplicated by an application root handler
        root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """rewrite_report.<name>; before configure_cli_logging, the env level applies."""
    logger = logging.getLogger(f"{ROOT_LOGGER}.{name}")
    if not _configured:
        logger.setLevel(cli_log_level())
    return logger
