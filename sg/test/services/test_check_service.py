"""Tests for CheckService, including the guide shipped with the package."""

from __future__ import annotations

from pathlib import Path

from sg.core.config import Config, GuideConfig
from sg.core.project import Project
from sg.lint.base import CheckResult, CheckStatus
from sg.services.check import CheckReport, CheckService
from sg.services.guide import GuideService, LoadedGuide
from sg.services.render import RenderService


def _load(project_root: Path, config: Config) -> LoadedGuide:
    return GuideService(config=config, project=Project(root=project_root)).load().unwrap()


def _errors(report: CheckReport) -> list[CheckResult]:
    return [r for r in report.all_results() if r.is_error]


def test_consistent_guide_with_fresh_output(tmp_path: Path, guide_dir: Path) -> None:
    config = Config(guide=GuideConfig(source="guide"))
    guide = _load(tmp_path, config)
    out = tmp_path / "docs"
    RenderService(guide).write(out).unwrap()

    report = CheckService(guide=guide, config=config, output_dir=out).run()

    assert not report.has_errors()
    assert report.counts() == (0, 0)
    assert [r.name for r in report.sync] == ["guide.md", "rules.md"]
    assert [r.name for r in report.structure] == ["guide/naming: App layout"]


def test_stale_output_fails(tmp_path: Path, guide_dir: Path) -> None:
    config = Config(guide=GuideConfig(source="guide"))
    guide = _load(tmp_path, config)
    out = tmp_path / "docs"
    RenderService(guide).write(out).unwrap()
    (out / "rules.md").write_text("old\n", encoding="utf-8")

    report = CheckService(guide=guide, config=config, output_dir=out).run()

    assert report.has_errors()
    assert [(r.name, r.message) for r in _errors(report)] == [("rules.md", "out of date")]


def test_unrendered_guide_only_warns(tmp_path: Path, guide_dir: Path) -> None:
    config = Config(guide=GuideConfig(source="guide"))
    guide = _load(tmp_path, config)

    report = CheckService(guide=guide, config=config, output_dir=tmp_path / "docs").run()

    assert not report.has_errors()
    assert report.counts() == (0, 1)
    assert report.sync[0].status == CheckStatus.WARNING


class TestBundledGuide:
    def test_loads(self, tmp_path: Path) -> None:
        guide = _load(tmp_path, Config())

        assert guide.source.bundled
        assert len(guide.registry) > 20
        assert {d.id for d in guide.documents} == {"style-guide", "release-process"}
        assert guide.runbooks("pods")

    def test_is_self_consistent(self, tmp_path: Path) -> None:
        guide = _load(tmp_path, Config())
        out = tmp_path / "docs"
        RenderService(guide).write(out).unwrap()

        report = CheckService(guide=guide, config=Config(), output_dir=out).run()

        assert _errors(report) == []
        assert [r for r in report.all_results() if r.is_warning] == []

    def test_every_category_is_used(self, tmp_path: Path) -> None:
        guide = _load(tmp_path, Config())
        assert len(guide.registry.by_category()) == 6
