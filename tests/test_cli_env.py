"""Tests for CLI environment loading (.env) and config precedence."""
import os
from pathlib import Path


def test_load_environment_reads_dotenv_without_overriding_shell(tmp_path: Path, monkeypatch) -> None:
    """Values from .env fill gaps; variables exported in the shell win."""
    env_file = tmp_path / ".env"
    env_file.write_text(
        "REWRITE_REPORT_ACTIVE_RECIPES=from.dotenv\nREWRITE_REPORT_ACTIVE_STYLES=style.dotenv\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("REWRITE_REPORT_ACTIVE_STYLES", "style.shell")
    # registered with monkeypatch so the value loaded from .env is undone afterwards
    monkeypatch.setenv("REWRITE_REPORT_ACTIVE_RECIPES", "placeholder")
    monkeypatch.delenv("REWRITE_REPORT_ACTIVE_RECIPES")

    from rewrite_report_cli import _load_environment

    _load_environment(env_file)

    assert os.environ["REWRITE_REPORT_ACTIVE_RECIPES"] == "from.dotenv"
    assert os.environ["REWRITE_REPORT_ACTIVE_STYLES"] == "style.shell"


def test_cli_logging_levels() -> None:
    import logging

    from cli.orchestration.logging import configure_cli_logging, get_logger

    configure_cli_logging(quiet=True)
    assert logging.getLogger("rewrite_report").level == logging.WARNING
    configure_cli_logging(verbose=True)
    assert logging.getLogger("rewrite_report").level == logging.DEBUG
    assert get_logger("pipeline").name == "rewrite_report.pipeline"


def test_log_level_from_environment(monkeypatch) -> None:
    import logging

    from cli.orchestration.logging import configure_cli_logging

    monkeypatch.setenv("REWRITE_REPORT_LOG_LEVEL", "error")
    configure_cli_logging()
    assert logging.getLogger("rewrite_report").level == logging.ERROR


def test_cli_log_level_precedence() -> None:
    import logging

    from cli.orchestration.logging import cli_log_level

    env = {"REWRITE_REPORT_LOG_LEVEL": "warn"}
    assert cli_log_level(environ=env) == logging.WARNING
    assert cli_log_level(verbose=True, quiet=True, environ=env) == logging.DEBUG
    assert cli_log_level(quiet=True, environ={}) == logging.WARNING
    assert cli_log_level(environ={"REWRITE_REPORT_LOG_LEVEL": "loud"}) == logging.INFO
