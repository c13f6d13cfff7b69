"""Tests for sg.core.project module."""

from __future__ import annotations

from pathlib import Path

import pytest

from sg.core.project import Project, detect_project, find_project_upward, is_project_root
from sg.core.result import Err, Ok


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SG_ROOT", raising=False)


def test_is_project_root(tmp_path: Path) -> None:
    assert not is_project_root(tmp_path)
    (tmp_path / "sg.toml").write_text("", encoding="utf-8")
    assert is_project_root(tmp_path)


def test_find_upward(tmp_path: Path) -> None:
    (tmp_path / "sg.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "lib" / "features"
    nested.mkdir(parents=True)

    assert find_project_upward(nested) == tmp_path


def test_detect_uses_marker(tmp_path: Path) -> None:
    (tmp_path / "sg.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    result = detect_project(start_dir=nested)

    assert isinstance(result, Ok)
    assert result.value.root == tmp_path.resolve()
    assert result.value.source == "marker"


def test_detect_falls_back_to_start_dir(tmp_path: Path) -> None:
    result = detect_project(start_dir=tmp_path)

    assert isinstance(result, Ok)
    assert result.value.root == tmp_path.resolve()
    assert result.value.source == "cwd"


def test_detect_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SG_ROOT", str(tmp_path))

    result = detect_project(start_dir=Path("/"))

    assert isinstance(result, Ok)
    assert result.value.root == tmp_path.resolve()
    assert result.value.source == "env"


def test_detect_env_var_not_a_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SG_ROOT", str(tmp_path / "missing"))

    result = detect_project()

    assert isinstance(result, Err)
    assert "SG_ROOT" in result.error.message
    assert result.error.hint is not None


def test_resolve_relative_and_absolute(tmp_path: Path) -> None:
    project = Project(root=tmp_path)
    assert project.resolve("docs") == tmp_path / "docs"
    assert project.resolve(str(tmp_path / "abs")) == tmp_path / "abs"
    assert project.config_path == tmp_path / "sg.toml"
