from __future__ import annotations

import typer

from sg.cli.commands._helpers import load_guide
from sg.cli.context import build_context
from sg.core.errors import ErrorCode
from sg.output.console import Style


def runbook(
    title: str | None = typer.Argument(
        None,
        help="Only show runbooks whose title contains this text.",
    ),
) -> None:
    """Print runbook commands for copy-paste (nothing is executed)."""
    ctx = build_context()
    guide = load_guide(ctx)

    matches = guide.runbooks(title)
    if not matches:
        if title is None:
            ctx.console.warning("the guide has no runbooks")
            return
        available = ", ".join(rb.title for _, rb in guide.runbooks()) or "none"
        ctx.console.error(f"no runbook matches '{title}'")
        ctx.console.print(f"available: {available}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    for doc, rb in matches:
        ctx.console.header(rb.title)
        ctx.console.print(doc.title, Style.DIM)
        ctx.console.code("\n".join(rb.commands), rb.language)
        if rb.note:
            ctx.console.print(rb.note, Style.DIM)
