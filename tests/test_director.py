"""Tests for e2ekit.tools.director."""
from pathlib import Path

from e2ekit.tools.director import (
    create_dir,
    list_downloads,
    path_exists,
    read_file,
    remove_dir,
    write_file,
)


def test_list_downloads_empty_dir(tmp_path: Path) -> None:
    assert list_downloads(tmp_path) == []
    assert list_downloads(tmp_path / "missing") == []


def test_list_downloads_filters_and_sorts(tmp_path: Path) -> None:
    (tmp_path / "200_b.pdf").write_text("x")
    (tmp_path / "100_a.PDF").write_text("y")
    (tmp_path / "notes.txt").write_text("z")
    (tmp_path / "sub.pdf").mkdir()
    assert [p.name for p in list_downloads(tmp_path)] == ["100_a.PDF", "200_b.pdf"]


def test_create_and_remove_dir(tmp_path: Path) -> None:
    target = create_dir(tmp_path / "a" / "b")
    (target / "file.pdf").write_text("x")
    assert path_exists(target)

    assert remove_dir(tmp_path / "a") is True
    assert not path_exists(tmp_path / "a")
    assert remove_dir(tmp_path / "a") is False


def test_write_and_read_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    assert read_file(path) is None
    write_file(path, "{}")
    assert read_file(path) == "{}"
