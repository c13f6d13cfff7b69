"""Tests for GuideService."""

from __future__ import annotations

from pathlib import Path

from sg.core.config import Config, GuideConfig, RulesConfig
from sg.core.project import Project
from sg.core.result import Err, Ok
from sg.guide.loader import GuideError
from sg.rules.errors import RegistryError
from sg.services.guide import GuideService, LoadedGuide


def _load(project_root: Path, config: Config) -> LoadedGuide:
    result = GuideService(config=config, project=Project(root=project_root)).load()
    assert isinstance(result, Ok), result
    return result.value


def _config(
    disabled: tuple[str, ...] = (), limits: dict[str, int] | None = None
) -> Config:
    return Config(
        guide=GuideConfig(source="guide"),
        rules=RulesConfig(disabled=disabled, limits=limits or {}),
    )


def test_default_source_is_bundled(tmp_path: Path) -> None:
    source = GuideService(config=Config(), project=Project(root=tmp_path)).source()
    assert source.bundled
    assert source.rules_path.is_file()
    assert str(source) == "bundled guide"


def test_source_resolves_against_project(tmp_path: Path, guide_dir: Path) -> None:
    source = GuideService(config=_config(), project=Project(root=tmp_path)).source()
    assert source.root == guide_dir
    assert not source.bundled


def test_loads_registry_and_documents(tmp_path: Path, guide_dir: Path) -> None:
    guide = _load(tmp_path, _config())

    assert guide.registry.ids() == ["naming.bloc-suffix", "size.widget-length", "release.hotfix-flow"]
    assert [d.id for d in guide.documents] == ["guide"]
    assert guide.disabled == ()


def test_disabled_rules_are_removed(tmp_path: Path, guide_dir: Path) -> None:
    guide = _load(tmp_path, _config(disabled=("release.hotfix-flow",)))

    assert "release.hotfix-flow" not in guide.registry
    assert guide.disabled == ("release.hotfix-flow",)


def test_limits_override(tmp_path: Path, guide_dir: Path) -> None:
    guide = _load(tmp_path, _config(limits={"size.widget-length": 120}))
    assert guide.registry.get("size.widget-length").unwrap().limit == 120


def test_limit_for_disabled_rule_is_ignored(tmp_path: Path, guide_dir: Path) -> None:
    guide = _load(
        tmp_path,
        _config(disabled=("size.widget-length",), limits={"size.widget-length": 120}),
    )
    assert "size.widget-length" not in guide.registry


def test_unknown_disabled_rule_is_an_error(tmp_path: Path, guide_dir: Path) -> None:
    result = GuideService(
        config=_config(disabled=("release.hotfix-flw",)), project=Project(root=tmp_path)
    ).load()

    assert isinstance(result, Err)
    assert isinstance(result.error, RegistryError)
    assert result.error.message == "[rules] disabled lists unknown rule: release.hotfix-flw"
    assert result.error.hint == "did you mean: release.hotfix-flow"


def test_limit_on_rule_without_limit(tmp_path: Path, guide_dir: Path) -> None:
    result = GuideService(
        config=_config(limits={"naming.bloc-suffix": 3}), project=Project(root=tmp_path)
    ).load()

    assert isinstance(result, Err)
    assert result.error.kind == "no_limit"


def test_missing_source(tmp_path: Path) -> None:
    result = GuideService(config=_config(), project=Project(root=tmp_path)).load()

    assert isinstance(result, Err)
    assert isinstance(result.error, GuideError)
    assert result.error.kind == "not_found"
    assert result.error.hint == "fix [guide] source in sg.toml"


def test_missing_rules_file(tmp_path: Path, guide_dir: Path) -> None:
    (guide_dir / "rules.toml").unlink()

    result = GuideService(config=_config(), project=Project(root=tmp_path)).load()

    assert isinstance(result, Err)
    assert isinstance(result.error, RegistryError)
    assert result.error.kind == "not_found"


def test_runbook_query(tmp_path: Path, guide_dir: Path) -> None:
    guide = _load(tmp_path, _config())

    assert [rb.title for _, rb in guide.runbooks()] == ["Clean rebuild", "Reinstall iOS pods"]
    assert [rb.title for _, rb in guide.runbooks("  PODS ")] == ["Reinstall iOS pods"]
    assert guide.runbooks("deploy") == []
