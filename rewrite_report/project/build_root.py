"""
Build root and repository root resolution.

The build root is the lexicographically smallest base directory among all
modules of a build and their ancestors, ignoring anything inside the shared
artifact cache. Ordering is by normalized path string; case and separators
are not folded, so the result is reproducible but not semantic.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Set

from rewrite_report.errors import BuildRootError

VCS_MARKER = ".git"

_log = logging.getLogger("rewrite_report.project")


@dataclass(eq=False)
class ProjectNode:
    """One module of the build. Parents form a tree; traversal goes upward only."""

    id: str
    basedir: Optional[Path] = None
    parent: Optional["ProjectNode"] = None


def _normalize(path: Path | str) -> Path:
    return Path(os.path.normpath(str(path)))


def _inside(path: Path, container: Path) -> bool:
    return path == container or container in path.parents


def collect_base_dirs(projects: Iterable[ProjectNode], artifact_cache: Path | str) -> Set[Path]:
    """Base dirs of every node and its ancestors, outside the artifact cache."""
    cache = _normalize(artifact_cache)
    found: Set[Path] = set()
    for project in projects:
        visited: Set[int] = set()
        node: Optional[ProjectNode] = project
        while node is not None and id(node) not in visited:
            visited.add(id(node))
            if node.basedir is None:
                break
            basedir = _normalize(node.basedir)
            if _inside(basedir, cache):
                if node is project:
                    break
                # Cached parent poms do not hide the ancestors above them.
                node = node.parent
                continue
            found.add(basedir)
            node = node.parent
    return found


def resolve_build_root(
    projects: Iterable[ProjectNode],
    artifact_cache: Path | str,
    execution_root: Path | str | None = None,
) -> Path:
    """Canonical root of the build, independent of the module it was run from."""
    base_dirs = collect_base_dirs(projects, artifact_cache)
    if base_dirs:
        root = sorted(base_dirs, key=str)[0]
        _log.debug("rewrite-report: build root %s (from %d base dirs)", root, len(base_dirs))
        return root
    if execution_root is None or not str(execution_root).strip():
        raise BuildRootError("no module base directory found and no execution root recorded")
    _log.debug("rewrite-report: no module base dirs, using execution root %s", execution_root)
    return _normalize(execution_root)


def find_repository_root(build_root: Path) -> Path:
    """Closest directory at or above build_root holding .git; build_root if none."""
    candidate: Optional[Path] = build_root
    while candidate is not None:
        if (candidate / VCS_MARKER).exists():
            return candidate
        parent = candidate.parent
        candidate = parent if parent != candidate else None
    return build_root
