from __future__ import annotations

from pathlib import Path

import typer

from sg.cli.commands._helpers import exit_on_error, load_guide
from sg.cli.context import build_context
from sg.core.errors import ErrorCode
from sg.output.console import Style
from sg.services.render import RenderService


def render(
    out: Path | None = typer.Option(
        None,
        "--out",
        "-o",
        help="Output directory (default: [guide] output in sg.toml, or docs/).",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Write nothing; fail if the rendered files are out of date.",
    ),
) -> None:
    """Render the guide documents and the rule index as Markdown."""
    ctx = build_context()
    guide = load_guide(ctx)

    output_dir = ctx.project.resolve(str(out)) if out is not None else ctx.output_dir
    service = RenderService(guide)
    ctx.console.print(f"source: {guide.source}", Style.DIM)

    if check:
        stale = service.stale(output_dir)
        if stale:
            for path in stale:
                ctx.console.error(f"out of date: {path}")
            ctx.console.print("hint: run: sg render", Style.DIM)
            raise typer.Exit(code=int(ErrorCode.CHECK_FAILED))
        ctx.console.success(f"{output_dir} is up to date")
        return

    outcome = exit_on_error(service.write(output_dir), ctx, ErrorCode.IO_ERROR)
    for path in outcome.written:
        ctx.console.success(f"wrote {path}")
    if outcome.unchanged:
        ctx.console.print(f"{len(outcome.unchanged)} file(s) unchanged", Style.DIM)
