"""Tests for :mod:`project_environment.get_root`."""

from __future__ import annotations

import pytest

from project_environment import DEFAULT_ROOT_FILES, RootNotFoundError, find_root, locate_root


def test_default_markers_order():
    assert DEFAULT_ROOT_FILES == (
        "requirements.txt", ".git", ".gitmodules", "pyproject.toml", "setup.py")


def test_find_root_returns_nearest_marked_ancestor(project):
    nested = project / "src" / "app"
    (project / "src" / "setup.py").write_text("")

    assert find_root(nested) == project / "src"


def test_find_root_accepts_directories_as_markers(tmp_path):
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    (root / "lib" / "deep").mkdir(parents=True)

    assert find_root(root / "lib" / "deep") == root.resolve()


def test_find_root_starting_at_root_itself(project):
    assert find_root(project) == project


def test_find_root_returns_none_without_markers(tmp_path):
    empty = tmp_path / "a" / "b"
    empty.mkdir(parents=True)

    assert find_root(empty) is None


def test_custom_markers_are_used(tmp_path):
    root = tmp_path / "site"
    (root / "web").mkdir(parents=True)
    (root / "manage.py").write_text("")

    assert find_root(root / "web") is None
    assert find_root(root / "web", ("manage.py",)) == root.resolve()


def test_locate_root_raises_with_instructions(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()

    with pytest.raises(RootNotFoundError) as excinfo:
        locate_root(empty)

    message = str(excinfo.value)
    assert "Cannot determine project root" in message
    assert "set the project root by hand" in message
    assert "pyproject.toml" in message
    assert isinstance(excinfo.value, FileNotFoundError)


def test_locate_root_falls_back_to_cwd(tmp_path, project, monkeypatch):
    outside = tmp_path / "outside"
    outside.mkdir()
    monkeypatch.chdir(project / "src")

    assert locate_root(outside) == project
    with pytest.raises(RootNotFoundError):
        locate_root(outside, fallback_to_cwd=False)
