"""Markers attached to source tree nodes.

The union is closed: SearchResult | ErrorMarkup | Generated | OtherMarker.
Rendering and error extraction branch on exactly these kinds.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Union, assert_never

from rewrite_report.errors import ManifestError


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Informational highlight left by a search recipe."""

    id: str = field(default_factory=_new_id)
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ErrorMarkup:
    """Failure recorded by the engine while transforming a node."""

    detail: str
    id: str = field(default_factory=_new_id)
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Generated:
    """Marks a snapshot as machine-generated source."""

    id: str = field(default_factory=_new_id)


@dataclass(frozen=True, slots=True)
class OtherMarker:
    """Engine-internal bookkeeping; never shown in rendered output."""

    id: str = field(default_factory=_new_id)
    kind: str = "other"


Marker = Union[SearchResult, ErrorMarkup, Generated, OtherMarker]


def is_fenced(marker: Marker) -> bool:
    """True for marker kinds that stay visible in diff output."""
    if isinstance(marker, (SearchResult, ErrorMarkup)):
        return True
    if isinstance(marker, (Generated, OtherMarker)):
        return False
    assert_never(marker)


def marker_from_dict(data: Dict[str, Any]) -> Marker:
    """Build a marker from its manifest form: {kind, id, description|detail}."""
    if not isinstance(data, dict):
        raise ManifestError(f"marker must be a mapping, got {type(data).__name__}")
    kind = str(data.get("kind") or "").strip().lower()
    extra: Dict[str, Any] = {}
    if data.get("id") is not None:
        extra["id"] = str(data["id"])
    if kind == "search_result":
        return SearchResult(description=data.get("description"), **extra)
    if kind == "error":
        detail = data.get("detail")
        if not detail:
            raise ManifestError("error marker requires 'detail'")
        return ErrorMarkup(detail=str(detail), message=data.get("message"), **extra)
    if kind == "generated":
        return Generated(**extra)
    if kind in ("other", ""):
        return OtherMarker(**extra)
    # Unknown engine markers are bookkeeping as far as reporting is concerned.
    return OtherMarker(kind=kind, **extra)
