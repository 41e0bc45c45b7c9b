"""Result model, diff rendering and classification façade."""

from .container import ResultsContainer  # noqa: F401
from .markers import ErrorMarkup, Generated, Marker, OtherMarker, SearchResult  # noqa: F401
from .result import TransformationResult  # noqa: F401
from .tree import SourceNode, SourceSnapshot, find_markers, visit_preorder  # noqa: F401

__all__ = [
    "ResultsContainer",
    "TransformationResult",
    "SourceNode",
    "SourceSnapshot",
    "Marker",
    "SearchResult",
    "ErrorMarkup",
    "Generated",
    "OtherMarker",
    "find_markers",
    "visit_preorder",
]
