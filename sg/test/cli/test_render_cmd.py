from __future__ import annotations

from pathlib import Path

import pytest
import typer

from sg.core.config import Config, GuideConfig
from sg.core.errors import ErrorCode
from sg.test.cli.conftest import PatchContext, console_of


def test_render_writes_to_configured_output(patch_context: PatchContext, tmp_path: Path) -> None:
    import sg.cli.commands.render_cmd as render_cmd

    ctx = patch_context(render_cmd, Config(guide=GuideConfig(output="site")))

    render_cmd.render(out=None, check=False)

    written = sorted(p.name for p in (tmp_path / "site").iterdir())
    assert written == ["release-process.md", "rules.md", "style-guide.md"]
    assert len(console_of(ctx).find("wrote ")) == 3


def test_render_twice_leaves_files_unchanged(patch_context: PatchContext) -> None:
    import sg.cli.commands.render_cmd as render_cmd

    patch_context(render_cmd)
    render_cmd.render(out=None, check=False)

    ctx = patch_context(render_cmd)
    render_cmd.render(out=None, check=False)

    console = console_of(ctx)
    assert not console.find("wrote ")
    assert console.find("3 file(s) unchanged")


def test_render_out_is_relative_to_project(patch_context: PatchContext, tmp_path: Path) -> None:
    import sg.cli.commands.render_cmd as render_cmd

    patch_context(render_cmd)

    render_cmd.render(out=Path("build/guide"), check=False)

    assert (tmp_path / "build" / "guide" / "rules.md").is_file()


def test_render_check_fails_when_stale(patch_context: PatchContext) -> None:
    import sg.cli.commands.render_cmd as render_cmd

    ctx = patch_context(render_cmd)

    with pytest.raises(typer.Exit) as exc:
        render_cmd.render(out=None, check=True)

    assert exc.value.exit_code == int(ErrorCode.CHECK_FAILED)
    console = console_of(ctx)
    assert len(console.find("out of date:")) == 3
    assert console.find("hint: run: sg render")


def test_render_check_passes_after_render(patch_context: PatchContext, tmp_path: Path) -> None:
    import sg.cli.commands.render_cmd as render_cmd

    patch_context(render_cmd)
    render_cmd.render(out=None, check=False)

    ctx = patch_context(render_cmd)
    render_cmd.render(out=None, check=True)

    assert console_of(ctx).has_success()
    assert (tmp_path / "docs").is_dir()


def test_render_unwritable_output_is_io_error(patch_context: PatchContext, tmp_path: Path) -> None:
    import sg.cli.commands.render_cmd as render_cmd

    (tmp_path / "docs").write_text("a file, not a directory", encoding="utf-8")
    ctx = patch_context(render_cmd)

    with pytest.raises(typer.Exit) as exc:
        render_cmd.render(out=None, check=False)

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert console_of(ctx).has_error()
