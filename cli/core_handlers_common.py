"""Shared helpers for result command handlers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rewrite_report.config import ReportConfig, load_config, split_list
from rewrite_report.manifest import RunManifest, load_manifest


def _err(msg: str) -> None:
    """Log unified error message (via logger, respects --quiet)."""
    _clog().error("rewrite-report: %s", msg)


def _warn(msg: str) -> None:
    _clog().warning("rewrite-report: %s", msg)


def _clog() -> Any:
    from cli.orchestration.logging import get_logger

    return get_logger("core_handlers")


def _check_path(path: Path) -> int:
    """Return 0 if the manifest file exists, 1 and log an error otherwise."""
    if not path.exists():
        _err(f"path does not exist: {path}")
        return 1
    if not path.is_file():
        _err(f"not a file: {path}")
        return 1
    return 0


def _load(args: Any) -> tuple[RunManifest, ReportConfig]:
    """Manifest plus config: pyproject/env from --project (or manifest dir), then CLI flags."""
    manifest = load_manifest(Path(args.manifest).resolve())
    project = getattr(args, "project", None)
    config = load_config(Path(project).resolve() if project else manifest.path.parent)
    recipes = getattr(args, "active_recipes", None)
    styles = getattr(args, "active_styles", None)
    config = config.with_overrides(
        artifact_cache=getattr(args, "artifact_cache", None),
        active_recipes=split_list(recipes) if recipes is not None else None,
        active_styles=split_list(styles) if styles is not None else None,
        fail_on_invalid_active_recipes=getattr(args, "fail_on_invalid_active_recipes", None),
        patch_file=getattr(args, "patch_file", None),
    )
    return manifest, config
