from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from sg.cli.context import CLIContext
from sg.core.config import Config
from sg.core.project import Project
from sg.output.console import MockConsole

type PatchContext = Callable[..., CLIContext]


@pytest.fixture
def patch_context(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PatchContext:
    """Make a command module's build_context return a MockConsole context.

    Usage: ctx = patch_context(module, config=Config(...))
    """

    def _patch(module: object, config: Config | None = None) -> CLIContext:
        ctx = CLIContext(
            project=Project(root=tmp_path),
            config=config or Config(),
            console=MockConsole(),
        )
        monkeypatch.setattr(module, "build_context", lambda: ctx)
        return ctx

    return _patch


def console_of(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console
