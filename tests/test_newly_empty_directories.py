"""Tests for ResultsContainer.newly_empty_directories."""
from pathlib import Path

import pytest
from support import result, snap

from rewrite_report.errors import CleanupError
from rewrite_report.results import ResultsContainer


def test_removes_directory_emptied_by_delete(tmp_path: Path) -> None:
    pkg = tmp_path / "src" / "gone"
    pkg.mkdir(parents=True)
    c = ResultsContainer(tmp_path, [result(before=snap("src/gone/Old.java", "x"))])
    # the file itself was already removed by the writer
    removed = c.newly_empty_directories()
    assert removed == [pkg]
    assert not pkg.exists()
    assert (tmp_path / "src").is_dir()


def test_keeps_directory_with_remaining_entry(tmp_path: Path) -> None:
    pkg = tmp_path / "src" / "kept"
    pkg.mkdir(parents=True)
    (pkg / "Other.java").write_text("class Other {}")
    c = ResultsContainer(tmp_path, [result(before=snap("src/kept/Old.java", "x"))])
    assert c.newly_empty_directories() == []
    assert pkg.is_dir()


def test_moved_sources_are_candidates(tmp_path: Path) -> None:
    old = tmp_path / "a"
    old.mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "X.java").write_text("x")
    r = result(before=snap("a/X.java", "x"), after=snap("b/X.java", "x"))
    c = ResultsContainer(tmp_path, [r])
    assert c.newly_empty_directories() == [old]
    assert (tmp_path / "b").is_dir()


def test_candidates_deduplicated_in_insertion_order(tmp_path: Path) -> None:
    for d in ("m", "d"):
        (tmp_path / d).mkdir()
    c = ResultsContainer(
        tmp_path,
        [
            result(before=snap("d/1.txt", "1")),
            result(before=snap("d/2.txt", "2")),
            result(before=snap("m/3.txt", "3"), after=snap("elsewhere/3.txt", "3")),
        ],
    )
    assert c.newly_empty_directories() == [tmp_path / "m", tmp_path / "d"]


def test_missing_directory_is_skipped(tmp_path: Path) -> None:
    c = ResultsContainer(tmp_path, [result(before=snap("never/there.txt", "x"))])
    assert c.newly_empty_directories() == []


def test_no_candidates_without_moves_or_deletes(tmp_path: Path) -> None:
    c = ResultsContainer(tmp_path, [result(after=snap("new.txt", "n"))])
    assert c.newly_empty_directories() == []


def test_failure_on_one_directory_does_not_stop_others(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "bad").mkdir()
    (tmp_path / "good").mkdir()
    real_rmdir = Path.rmdir

    def flaky_rmdir(self):
        if self.name == "bad":
            raise PermissionError("denied")
        return real_rmdir(self)

    monkeypatch.setattr(Path, "rmdir", flaky_rmdir)
    c = ResultsContainer(
        tmp_path,
        [result(before=snap("bad/a.txt", "a")), result(before=snap("good/b.txt", "b"))],
    )
    with pytest.raises(CleanupError) as info:
        c.newly_empty_directories()
    assert info.value.removed == [tmp_path / "good"]
    assert [p for p, _ in info.value.failures] == [tmp_path / "bad"]
    assert not (tmp_path / "good").exists()
    assert (tmp_path / "bad").exists()
    # classification is untouched
    assert len(c.deleted) == 2
