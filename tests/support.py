"""Builders shared by tests."""
from pathlib import Path

from rewrite_report.results import SourceNode, SourceSnapshot, TransformationResult


def snap(path: str, text: str = "", markers=(), children=()) -> SourceSnapshot:
    """Snapshot with a single root node (plus optional children)."""
    return SourceSnapshot(Path(path), SourceNode(text=text, markers=tuple(markers), children=tuple(children)))


def result(before=None, after=None, recipes=()) -> TransformationResult:
    return TransformationResult(before=before, after=after, recipes=tuple(recipes))
