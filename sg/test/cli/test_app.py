from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from sg import __version__
from sg.cli.app import app
from sg.core.errors import ErrorCode
from sg.core.project import PROJECT_ENV_VAR

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_no_args_shows_help() -> None:
    result = runner.invoke(app, [])
    assert "rules" in result.output
    assert "runbook" in result.output


def test_project_must_be_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--project", str(tmp_path / "missing"), "rules"])
    assert result.exit_code == int(ErrorCode.USER_ERROR)


def test_rules_through_the_app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(PROJECT_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["rule", "naming.files"])

    assert result.exit_code == 0
    assert "File names use snake_case" in result.output


def test_bad_config_is_config_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "sg.toml").write_text("[check]\nstrict = 'yes'\n", encoding="utf-8")
    monkeypatch.setenv(PROJECT_ENV_VAR, str(tmp_path))

    result = runner.invoke(app, ["check"])

    assert result.exit_code == int(ErrorCode.CONFIG_ERROR)


def test_project_option_sets_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # --project exports SG_ROOT; setenv lets monkeypatch undo it
    monkeypatch.setenv(PROJECT_ENV_VAR, str(tmp_path))

    result = runner.invoke(app, ["--project", str(tmp_path), "render"])

    assert result.exit_code == 0
    assert (tmp_path / "docs" / "rules.md").is_file()
