"""Shared fixtures for the project_environment tests."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

from project_environment import ProjectEnvironment, reload_settings


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run every test outside any project, with no variables and no shared instances."""

    monkeypatch.delenv("PROJECT_ENVIRONMENT", raising=False)
    monkeypatch.delenv("PROJECT_ENVIRONMENT_ROOT", raising=False)
    monkeypatch.delenv("PROJECT_ENVIRONMENT_LOG_LEVEL", raising=False)
    nowhere = tmp_path / "nowhere"
    nowhere.mkdir()
    monkeypatch.chdir(nowhere)
    reload_settings()
    ProjectEnvironment.clear_instances()
    yield
    ProjectEnvironment.clear_instances()
    reload_settings()


@pytest.fixture
def project(tmp_path) -> Path:
    """A project tree: ``proj/pyproject.toml`` plus an empty ``proj/src/app``."""

    root = tmp_path / "proj"
    (root / "src" / "app").mkdir(parents=True)
    (root / "pyproject.toml").write_text("[project]\nname = 'app'\n")
    return root.resolve()


@pytest.fixture
def load_module(monkeypatch):
    """Import a module from an arbitrary file so that ``__file__`` points there."""

    def _load(path: Path, name: str, source: str):
        path.write_text(source)
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)
        monkeypatch.setitem(sys.modules, name, module)
        spec.loader.exec_module(module)
        return module

    return _load
