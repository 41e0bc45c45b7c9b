"""
Results container: classifies recipe results and cleans up after them.

Classification is a single pass, first matching branch wins:

    before  after   same path   category
    None    None    -           dropped (warning)
    None    set     -           generated
    set     None    -           deleted
    set     set     no          moved
    set     set     yes         refactored_in_place, if the fenced diff is non-empty

Usage:
    results = ResultsContainer(repository_root, recipe_results)
    if results.is_not_empty():
        err = results.first_exception()
        ...
    removed = results.newly_empty_directories()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from rewrite_report.errors import CleanupError, RecipeRunError

from .result import TransformationResult

_log = logging.getLogger("rewrite_report.results")


class ResultsContainer:
    """Four categories of results rooted at project_root."""

    def __init__(self, project_root: Path, results: Iterable[TransformationResult]) -> None:
        self.project_root = Path(project_root)
        self.generated: List[TransformationResult] = []
        self.deleted: List[TransformationResult] = []
        self.moved: List[TransformationResult] = []
        self.refactored_in_place: List[TransformationResult] = []
        for result in results:
            self._classify(result)

    def _classify(self, result: TransformationResult) -> None:
        before, after = result.before, result.after
        if before is None and after is None:
            _log.warning("rewrite-report: dropping result with neither before nor after source (recipes: %s)", list(result.recipes))
            return
        if before is None:
            self.generated.append(result)
        elif after is None:
            self.deleted.append(result)
        elif before.source_path != after.source_path:
            self.moved.append(result)
        elif result.diff():
            self.refactored_in_place.append(result)
        else:
            _log.debug("rewrite-report: no visible change in %s", before.source_path)

    def categories(self) -> Iterator[Tuple[str, List[TransformationResult]]]:
        """Categories in reporting order."""
        yield "generated", self.generated
        yield "deleted", self.deleted
        yield "moved", self.moved
        yield "refactored_in_place", self.refactored_in_place

    def all_results(self) -> List[TransformationResult]:
        return [r for _, results in self.categories() for r in results]

    def is_not_empty(self) -> bool:
        return bool(self.generated or self.deleted or self.moved or self.refactored_in_place)

    def first_exception(self) -> RecipeRunError | None:
        """First error embedded in any after tree, or None."""
        for _, results in self.categories():
            for result in results:
                for detail in result.recipe_errors():
                    return RecipeRunError(detail)
        return None

    def counts(self) -> Dict[str, int]:
        return {name: len(results) for name, results in self.categories()}

    def newly_empty_directories(self) -> List[Path]:
        """
        Remove directories left empty by moved and deleted files.

        Each candidate is checked and removed independently; failures are
        collected and raised together as CleanupError after every candidate
        has been tried. Returns the directories that were removed.
        """
        candidates: Dict[Path, None] = {}
        for result in (*self.moved, *self.deleted):
            candidates[(self.project_root / result.require_before().source_path).parent] = None
        removed: List[Path] = []
        failures: List[Tuple[Path, OSError]] = []
        for directory in candidates:
            if not directory.is_dir():
                _log.debug("rewrite-report: %s no longer exists, nothing to clean", directory)
                continue
            try:
                if any(directory.iterdir()):
                    continue
                directory.rmdir()
            except OSError as e:
                failures.append((directory, e))
                continue
            _log.info("rewrite-report: removed empty directory %s", directory)
            removed.append(directory)
        if failures:
            raise CleanupError(failures, removed)
        return removed
