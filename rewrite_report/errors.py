"""Exception hierarchy for rewrite-report.

Library code raises these; CLI handlers turn them into exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple


class RewriteReportError(Exception):
    """Base class for all rewrite-report failures."""


class BuildRootError(RewriteReportError):
    """No build root could be computed and no execution root was recorded."""


class ConfigError(RewriteReportError):
    """Project configuration file is unreadable or malformed."""


class ManifestError(RewriteReportError):
    """Run manifest is unreadable or malformed."""


class RecipeNotFoundError(RewriteReportError):
    """An active recipe is not among the available descriptors."""


class RecipeValidationError(RewriteReportError):
    """Active recipes failed validation and the run is configured to stop."""


class RecipeRunError(RewriteReportError):
    """Error the transformation engine embedded in a transformed tree."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class CleanupError(RewriteReportError):
    """One or more newly-empty directories could not be listed or removed."""

    def __init__(self, failures: Sequence[Tuple[Path, OSError]], removed: Sequence[Path]) -> None:
        self.failures: List[Tuple[Path, OSError]] = list(failures)
        self.removed: List[Path] = list(removed)
        lines = [f"{path}: {err}" for path, err in self.failures]
        super().__init__("could not clean up directories: " + "; ".join(lines))
