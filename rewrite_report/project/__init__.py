"""Project hierarchy: build root and repository root resolution."""

from .build_root import (  # noqa: F401
    VCS_MARKER,
    ProjectNode,
    collect_base_dirs,
    find_repository_root,
    resolve_build_root,
)

__all__ = [
    "VCS_MARKER",
    "ProjectNode",
    "collect_base_dirs",
    "find_repository_root",
    "resolve_build_root",
]
