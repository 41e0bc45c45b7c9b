"""Before/after result pairs and their diff text."""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import List, Tuple

from .tree import FencedMarkerPrinter, MarkerPrinter, PlainPrinter, SourceSnapshot, error_details, render

DEV_NULL = "/dev/null"


@dataclass(frozen=True, slots=True)
class TransformationResult:
    """One file's outcome. Either side may be None; both None is degenerate."""

    before: SourceSnapshot | None
    after: SourceSnapshot | None
    recipes: Tuple[str, ...] = ()

    @property
    def is_degenerate(self) -> bool:
        return self.before is None and self.after is None

    @property
    def display_path(self) -> str:
        snap = self.after if self.after is not None else self.before
        return snap.source_path.as_posix() if snap is not None else "<none>"

    def require_before(self) -> SourceSnapshot:
        if self.before is None:
            raise ValueError(f"{self.display_path}: result has no before source")
        return self.before

    def require_after(self) -> SourceSnapshot:
        if self.after is None:
            raise ValueError(f"{self.display_path}: result has no after source")
        return self.after

    def diff(self, printer: MarkerPrinter | None = None) -> str:
        """Unified diff of the two renderings; empty when they print the same."""
        printer = printer or FencedMarkerPrinter()
        old = render(self.before.tree, printer) if self.before is not None else ""
        new = render(self.after.tree, printer) if self.after is not None else ""
        fromfile = f"a/{self.before.source_path.as_posix()}" if self.before is not None else DEV_NULL
        tofile = f"b/{self.after.source_path.as_posix()}" if self.after is not None else DEV_NULL
        if old == new:
            if self.before is None or self.after is None:
                # empty file created or deleted
                return f"--- {fromfile}\n+++ {tofile}\n"
            return ""
        lines = difflib.unified_diff(
            old.splitlines(keepends=True),
            new.splitlines(keepends=True),
            fromfile=fromfile,
            tofile=tofile,
        )
        return "".join(_terminate(line) for line in lines)

    def after_content(self) -> str:
        """After tree as it should be written to disk, markers stripped."""
        if self.after is None:
            return ""
        return render(self.after.tree, PlainPrinter())

    def recipe_errors(self) -> List[str]:
        """Error details embedded in the after tree, in pre-order."""
        if self.after is None:
            return []
        return error_details(self.after.tree)


def _terminate(line: str) -> str:
    return line if line.endswith("\n") else line + "\n\\ No newline at end of file\n"
