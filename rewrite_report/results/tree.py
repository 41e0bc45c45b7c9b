"""Source snapshots and the pre-order visitor shared by marker queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, List, Protocol, Tuple, Type, TypeVar

from .markers import ErrorMarkup, Marker, is_fenced

M = TypeVar("M")


@dataclass(frozen=True, slots=True)
class SourceNode:
    """One node of a transformed source tree: own text, markers, children."""

    text: str = ""
    markers: Tuple[Marker, ...] = ()
    children: Tuple["SourceNode", ...] = ()

    def find_first(self, kind: Type[M]) -> M | None:
        for marker in self.markers:
            if isinstance(marker, kind):
                return marker
        return None


@dataclass(frozen=True, slots=True)
class SourceSnapshot:
    """A file at one point in time. Snapshot-level markers live on the root node."""

    source_path: Path
    tree: SourceNode = field(default_factory=SourceNode)

    @property
    def markers(self) -> Tuple[Marker, ...]:
        return self.tree.markers


def iter_preorder(node: SourceNode) -> Iterator[SourceNode]:
    stack: List[SourceNode] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def visit_preorder(node: SourceNode | None, callback: Callable[[SourceNode], None]) -> None:
    """Invoke callback on every node of the tree, parents before children."""
    if node is None:
        return
    for current in iter_preorder(node):
        callback(current)


def find_markers(snapshot: SourceSnapshot | None, kind: Type[M]) -> List[M]:
    """All markers of the given kind in snapshot, in pre-order."""
    found: List[M] = []
    if snapshot is None:
        return found

    def _collect(node: SourceNode) -> None:
        found.extend(m for m in node.markers if isinstance(m, kind))

    visit_preorder(snapshot.tree, _collect)
    return found


class MarkerPrinter(Protocol):
    def before_syntax(self, marker: Marker) -> str: ...

    def after_syntax(self, marker: Marker) -> str: ...


class FencedMarkerPrinter:
    """Only SearchResult and ErrorMarkup survive, as {{id}} fences."""

    def before_syntax(self, marker: Marker) -> str:
        return "{{" + marker.id + "}}" if is_fenced(marker) else ""

    def after_syntax(self, marker: Marker) -> str:
        return "{{" + marker.id + "}}" if is_fenced(marker) else ""


class PlainPrinter:
    """Drops every marker; yields the file content as written to disk."""

    def before_syntax(self, marker: Marker) -> str:
        return ""

    def after_syntax(self, marker: Marker) -> str:
        return ""


def render(node: SourceNode, printer: MarkerPrinter) -> str:
    """Print a tree: marker prefixes, own text, children, marker suffixes."""
    out: List[str] = []
    stack: List[Tuple[SourceNode, bool]] = [(node, False)]
    while stack:
        current, closing = stack.pop()
        if closing:
            out.extend(printer.after_syntax(m) for m in current.markers)
            continue
        out.extend(printer.before_syntax(m) for m in current.markers)
        out.append(current.text)
        stack.append((current, True))
        stack.extend((child, False) for child in reversed(current.children))
    return "".join(out)


def error_details(node: SourceNode | None) -> List[str]:
    """Detail of the first ErrorMarkup on each node, pre-order."""
    details: List[str] = []

    def _collect(current: SourceNode) -> None:
        err = current.find_first(ErrorMarkup)
        if err is not None:
            details.append(err.detail)

    visit_preorder(node, _collect)
    return details


__all__ = [
    "SourceNode",
    "SourceSnapshot",
    "visit_preorder",
    "iter_preorder",
    "find_markers",
    "FencedMarkerPrinter",
    "PlainPrinter",
    "render",
    "error_details",
]
