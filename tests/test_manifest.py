"""Tests for run manifest loading."""
import json
from pathlib import Path

import pytest

from rewrite_report.errors import ManifestError
from rewrite_report.manifest import load_manifest, parse_manifest
from rewrite_report.results.markers import ErrorMarkup, Generated, SearchResult

MANIFEST = """
execution_root: /repo
artifact_cache: /cache
projects:
  - {id: parent, basedir: /repo}
  - {id: mod1, basedir: /repo/mod1, parent: parent}
recipes:
  - name: org.acme.Rename
    options: {from: a, to: b}
    recipe_list:
      - name: org.acme.Inner
results:
  - before: {path: src/A.java, tree: "class A {}"}
    after:
      path: src/A.java
      tree:
        text: "class B "
        children:
          - text: "{}"
            markers: [{kind: search_result, id: X}]
    recipes: [org.acme.Rename]
  - after: {path: gen/G.java, tree: "class G {}", markers: [{kind: generated, id: g}]}
  - before: {path: old/O.java, tree: {text: o, markers: [{kind: error, detail: boom}]}}
"""


def test_load_yaml_manifest(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    path.write_text(MANIFEST, encoding="utf-8")
    m = load_manifest(path)

    assert m.execution_root == Path("/repo")
    assert m.artifact_cache == Path("/cache")
    by_id = {p.id: p for p in m.projects}
    assert by_id["mod1"].parent is by_id["parent"]
    assert by_id["mod1"].basedir == Path("/repo/mod1")
    assert m.recipes[0].options == {"from": "a", "to": "b"}
    assert m.recipes[0].recipe_list[0].name == "org.acme.Inner"

    first, second, third = m.results
    assert first.recipes == ("org.acme.Rename",)
    assert first.before.tree.text == "class A {}"
    assert first.after.tree.children[0].markers == (SearchResult(id="X"),)
    assert second.before is None
    assert isinstance(second.after.markers[0], Generated)
    assert third.after is None
    assert isinstance(third.before.markers[0], ErrorMarkup)


def test_json_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"results": [{"after": {"path": "x.txt", "tree": "x"}}]}), encoding="utf-8")
    m = load_manifest(path)
    assert m.results[0].after.source_path == Path("x.txt")
    assert m.projects == []


def test_unknown_parent_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    path.write_text("projects:\n  - {id: a, basedir: /a, parent: ghost}\n", encoding="utf-8")
    with pytest.raises(ManifestError, match="unknown parent 'ghost'"):
        load_manifest(path)


def test_snapshot_requires_path(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    path.write_text("results:\n  - after: {tree: x}\n", encoding="utf-8")
    with pytest.raises(ManifestError, match=r"results\[0\]\.after"):
        load_manifest(path)


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    path.write_text("results: [unclosed\n", encoding="utf-8")
    with pytest.raises(ManifestError, match="invalid manifest"):
        load_manifest(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="cannot read manifest"):
        load_manifest(tmp_path / "nope.yml")


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ManifestError):
        load_manifest(path)


def test_recipe_options_must_be_mapping() -> None:
    data = {"recipes": [{"name": "r", "options": ["a"]}]}
    with pytest.raises(ManifestError, match=r"recipes\[0\]\.options: must be a mapping"):
        parse_manifest(data, Path("run.yml"))


@pytest.mark.parametrize(
    "data, field",
    [
        ({"recipes": "org.acme.Rename"}, r"manifest\.recipes"),
        ({"results": [{"after": {"path": "x", "tree": "x"}, "recipes": "abc"}]}, r"results\[0\]\.recipes"),
        ({"results": [{"after": {"path": "x", "tree": {"text": "x", "markers": "abc"}}}]}, r"results\[0\]\.after\.tree\.markers"),
        ({"results": [{"after": {"path": "x", "tree": {"text": "x", "children": "abc"}}}]}, r"results\[0\]\.after\.tree\.children"),
        ({"results": [{"before": {"path": "x", "tree": "x", "markers": {"kind": "generated"}}}]}, r"results\[0\]\.before\.markers"),
    ],
)
def test_list_fields_reject_scalars(data, field) -> None:
    with pytest.raises(ManifestError, match=field + ": must be a list"):
        parse_manifest(data, Path("run.yml"))
