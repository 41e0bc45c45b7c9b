"""Pytest configuration. Ensures project root is in sys.path for rewrite_report_cli and cli."""
import logging
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def logs_propagate(monkeypatch):
    """Let caplog see rewrite_report.* records even after CLI logging was configured."""
    monkeypatch.setattr(logging.getLogger("rewrite_report"), "propagate", True)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("REWRITE_REPORT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """CLI runs attach a stderr handler to the rewrite_report logger; drop it after each test."""
    yield
    import cli.orchestration.logging as cli_logging

    root = logging.getLogger(cli_logging.ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)
    cli_logging._configured = False
