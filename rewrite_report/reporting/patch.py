"""Patch file output: every result's diff concatenated in category order."""

from __future__ import annotations

from pathlib import Path

from rewrite_report.results import ResultsContainer


def build_patch(container: ResultsContainer) -> str:
    return "".join(result.diff() for result in container.all_results())


def write_patch(container: ResultsContainer, path: Path) -> Path:
    """Write the patch; relative paths resolve against the project root."""
    target = Path(path)
    if not target.is_absolute():
        target = container.project_root / target
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(build_patch(container), encoding="utf-8")
    return target
