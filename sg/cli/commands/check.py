from __future__ import annotations

import typer

from sg.cli.commands._helpers import load_guide
from sg.cli.context import CLIContext, build_context
from sg.core.errors import ErrorCode
from sg.lint import CheckResult, CheckStatus
from sg.output.console import Style
from sg.services.check import CheckService


def check(
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Exit non-zero when any check fails (default: [check] strict in sg.toml).",
    ),
) -> None:
    """Check the guide for self-consistency and stale rendered output."""
    ctx = build_context()
    guide = load_guide(ctx)

    service = CheckService(guide=guide, config=ctx.config, output_dir=ctx.output_dir)
    report = service.run()

    ctx.console.print(f"project: {ctx.project.root}", Style.DIM)
    ctx.console.print(f"source: {guide.source}", Style.DIM)

    _print_group(ctx, "References", report.references)
    _print_group(ctx, "Naming", report.naming)
    _print_group(ctx, "Structure", report.structure)
    _print_group(ctx, "Rendered output", report.sync)

    errors, warnings = report.counts()
    ctx.console.newline()
    summary = f"{errors} error(s), {warnings} warning(s)"
    if errors:
        ctx.console.error(summary)
    elif warnings:
        ctx.console.warning(summary)
    else:
        ctx.console.success(summary)

    is_strict = ctx.config.check.strict if strict is None else strict
    if is_strict and report.has_errors():
        raise typer.Exit(code=int(ErrorCode.CHECK_FAILED))


def _print_group(ctx: CLIContext, title: str, results: list[CheckResult]) -> None:
    console = ctx.console
    console.header(title)
    if not results:
        console.print("nothing to check", Style.DIM)
        return
    for r in results:
        style = _style_for_status(r.status)
        console.print(f"{r.name}: {r.message}", style)
        if r.hint and r.status != CheckStatus.OK:
            console.print(f"hint: {r.hint}", Style.DIM)


def _style_for_status(status: CheckStatus) -> Style:
    if status == CheckStatus.OK:
        return Style.SUCCESS
    if status == CheckStatus.WARNING:
        return Style.WARNING
    return Style.ERROR
