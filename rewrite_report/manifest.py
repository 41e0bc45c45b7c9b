"""
Run manifest loader.

A manifest is the materialized output of an engine run: the project model
(modules, base dirs, parents), the shared artifact cache, available recipe
descriptors and the before/after results. YAML; JSON is valid YAML too.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from rewrite_report.errors import ManifestError
from rewrite_report.project import ProjectNode
from rewrite_report.recipes import RecipeDescriptor, ValidationFailure
from rewrite_report.results import SourceNode, SourceSnapshot, TransformationResult
from rewrite_report.results.markers import marker_from_dict


@dataclass
class RunManifest:
    path: Path
    projects: List[ProjectNode] = field(default_factory=list)
    artifact_cache: Optional[Path] = None
    execution_root: Optional[Path] = None
    recipes: List[RecipeDescriptor] = field(default_factory=list)
    results: List[TransformationResult] = field(default_factory=list)


def _expand(raw: Any) -> Path:
    return Path(str(raw)).expanduser()


def _items(data: Dict[str, Any], key: str, where: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ManifestError(f"{where}.{key}: must be a list")
    return value


def _mapping(data: Dict[str, Any], key: str, where: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestError(f"{where}.{key}: must be a mapping")
    return value


def _node_from_dict(data: Any, where: str) -> SourceNode:
    if isinstance(data, str):
        return SourceNode(text=data)
    if not isinstance(data, dict):
        raise ManifestError(f"{where}: tree node must be a mapping or string")
    markers = tuple(marker_from_dict(m) for m in _items(data, "markers", where))
    children = tuple(
        _node_from_dict(child, f"{where}.children[{i}]") for i, child in enumerate(_items(data, "children", where))
    )
    return SourceNode(text=str(data.get("text") or ""), markers=markers, children=children)


def _snapshot_from_dict(data: Any, where: str) -> Optional[SourceSnapshot]:
    if data is None:
        return None
    if not isinstance(data, dict) or not data.get("path"):
        raise ManifestError(f"{where}: snapshot requires 'path'")
    tree = _node_from_dict(data.get("tree") or {}, f"{where}.tree")
    extra = tuple(marker_from_dict(m) for m in _items(data, "markers", where))
    if extra:
        tree = SourceNode(text=tree.text, markers=tree.markers + extra, children=tree.children)
    return SourceSnapshot(source_path=Path(str(data["path"])), tree=tree)


def _recipe_from_dict(data: Any, where: str) -> RecipeDescriptor:
    if not isinstance(data, dict) or not data.get("name"):
        raise ManifestError(f"{where}: recipe requires 'name'")
    errors = [
        ValidationFailure(property=str(e.get("property", "")), message=str(e.get("message", "")))
        for e in _items(data, "errors", where)
        if isinstance(e, dict)
    ]
    return RecipeDescriptor(
        name=str(data["name"]),
        display_name=str(data.get("display_name") or ""),
        options=dict(_mapping(data, "options", where)),
        recipe_list=[
            _recipe_from_dict(r, f"{where}.recipe_list[{i}]")
            for i, r in enumerate(_items(data, "recipe_list", where))
        ],
        errors=errors,
    )


def _projects_from_list(items: List[Any]) -> List[ProjectNode]:
    nodes: Dict[str, ProjectNode] = {}
    parents: Dict[str, str] = {}
    for i, item in enumerate(items):
        if not isinstance(item, dict) or not item.get("id"):
            raise ManifestError(f"projects[{i}]: project requires 'id'")
        pid = str(item["id"])
        if pid in nodes:
            raise ManifestError(f"projects[{i}]: duplicate project id '{pid}'")
        basedir = item.get("basedir")
        nodes[pid] = ProjectNode(id=pid, basedir=_expand(basedir) if basedir else None)
        if item.get("parent"):
            parents[pid] = str(item["parent"])
    for pid, parent_id in parents.items():
        if parent_id not in nodes:
            raise ManifestError(f"project '{pid}': unknown parent '{parent_id}'")
        nodes[pid].parent = nodes[parent_id]
    return list(nodes.values())


def parse_manifest(data: Any, path: Path) -> RunManifest:
    if not isinstance(data, dict):
        raise ManifestError(f"{path}: manifest must be a mapping")
    results: List[TransformationResult] = []
    for i, item in enumerate(_items(data, "results", "manifest")):
        if not isinstance(item, dict):
            raise ManifestError(f"results[{i}]: result must be a mapping")
        results.append(
            TransformationResult(
                before=_snapshot_from_dict(item.get("before"), f"results[{i}].before"),
                after=_snapshot_from_dict(item.get("after"), f"results[{i}].after"),
                recipes=tuple(str(r) for r in _items(item, "recipes", f"results[{i}]")),
            )
        )
    return RunManifest(
        path=path,
        projects=_projects_from_list(_items(data, "projects", "manifest")),
        artifact_cache=_expand(data["artifact_cache"]) if data.get("artifact_cache") else None,
        execution_root=_expand(data["execution_root"]) if data.get("execution_root") else None,
        recipes=[_recipe_from_dict(r, f"recipes[{i}]") for i, r in enumerate(_items(data, "recipes", "manifest"))],
        results=results,
    )


def load_manifest(path: Path) -> RunManifest:
    """Read and parse a run manifest file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"cannot read manifest {path}: {e}") from e
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ManifestError(f"invalid manifest {path}: {e}") from e
    return parse_manifest(data, path)
