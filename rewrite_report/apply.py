"""
Result writer.

Applies a ResultsContainer to the working tree: writes generated and
refactored files, removes deleted ones, relocates moved ones, then removes
directories the deletions and moves left empty.

Supports dry_run: when True, only reports what would be done.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from rewrite_report.errors import CleanupError
from rewrite_report.results import ResultsContainer, TransformationResult

_log = logging.getLogger("rewrite_report.apply")


def _write(root: Path, result: TransformationResult) -> str:
    source_path = result.require_after().source_path
    target = root / source_path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.after_content(), encoding="utf-8")
    return source_path.as_posix()


def _delete(root: Path, result: TransformationResult) -> str:
    source_path = result.require_before().source_path
    (root / source_path).unlink(missing_ok=True)
    return source_path.as_posix()


def apply_results(container: ResultsContainer, *, dry_run: bool = False) -> Dict[str, Any]:
    """
    Write the container's changes under its project root.

    Returns:
        {"dry_run": bool, "written": [str], "deleted": [str], "moved": [[from, to]],
         "removed_dirs": [str], "errors": [str], "cleanup_errors": [str]}
    """
    root = container.project_root
    written: List[str] = []
    deleted: List[str] = []
    moved: List[List[str]] = []
    removed_dirs: List[str] = []
    errors: List[str] = []
    cleanup_errors: List[str] = []

    for result in (*container.generated, *container.refactored_in_place):
        if dry_run:
            written.append(result.display_path)
            continue
        try:
            written.append(_write(root, result))
        except OSError as e:
            errors.append(f"{result.display_path}: {e}")

    for result in container.deleted:
        if dry_run:
            deleted.append(result.display_path)
            continue
        try:
            deleted.append(_delete(root, result))
        except OSError as e:
            errors.append(f"{result.display_path}: {e}")

    for result in container.moved:
        pair = [result.require_before().source_path.as_posix(), result.require_after().source_path.as_posix()]
        if dry_run:
            moved.append(pair)
            continue
        try:
            _write(root, result)
            _delete(root, result)
            moved.append(pair)
        except OSError as e:
            errors.append(f"{pair[0]} -> {pair[1]}: {e}")

    if not dry_run:
        try:
            removed = container.newly_empty_directories()
        except CleanupError as e:
            removed = e.removed
            cleanup_errors.extend(f"{path}: {err}" for path, err in e.failures)
        removed_dirs = [str(p) for p in removed]

    if errors:
        _log.warning("rewrite-report: %d error(s) while writing results", len(errors))
    return {
        "dry_run": dry_run,
        "written": written,
        "deleted": deleted,
        "moved": moved,
        "removed_dirs": removed_dirs,
        "errors": errors,
        "cleanup_errors": cleanup_errors,
    }
