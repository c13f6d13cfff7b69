from __future__ import annotations

import typer

from sg.cli.commands._helpers import exit_on_error, load_guide
from sg.cli.context import CLIContext, build_context
from sg.core.errors import ErrorCode
from sg.output.console import Style
from sg.rules.model import Category, Rule


def rules(
    category: Category | None = typer.Option(
        None,
        "--category",
        "-c",
        help="Only list rules of this category.",
    ),
) -> None:
    """List guide rules, grouped by category."""
    ctx = build_context()
    guide = load_guide(ctx)

    grouped = guide.registry.by_category()
    if category is not None:
        grouped = {c: r for c, r in grouped.items() if c == category}

    if not grouped:
        ctx.console.warning("no rules")
        return

    for cat, items in grouped.items():
        ctx.console.header(cat.label)
        for rule in items:
            suffix = f" ({rule.limit_text})" if rule.limit_text else ""
            ctx.console.print(f"{rule.id}  {rule.title}{suffix}")

    if guide.disabled:
        ctx.console.newline()
        ctx.console.print(f"disabled: {', '.join(guide.disabled)}", Style.DIM)


def rule(
    rule_id: str = typer.Argument(..., help="Rule id, e.g. naming.bloc-suffix"),
) -> None:
    """Show one rule with its examples."""
    ctx = build_context()
    guide = load_guide(ctx)

    if rule_id in guide.disabled:
        ctx.console.warning(f"{rule_id} is disabled in sg.toml")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    found = exit_on_error(guide.registry.get(rule_id), ctx, ErrorCode.USER_ERROR)
    print_rule(ctx, found)


def print_rule(ctx: CLIContext, rule: Rule) -> None:
    console = ctx.console
    console.header(rule.title)
    console.print(f"{rule.id} · {rule.category.label}", Style.DIM)
    if rule.limit_text:
        console.print(f"limit: {rule.limit_text}", Style.BOLD)
    if rule.description:
        console.newline()
        console.print(rule.description)

    if rule.good_names:
        console.newline()
        console.print("Do:", Style.SUCCESS)
        for example in rule.good_names:
            console.print(f"  {example.name}")
    if rule.bad_names:
        console.newline()
        console.print("Don't:", Style.ERROR)
        for example in rule.bad_names:
            console.print(f"  {example.name}")

    for snippet in rule.snippets:
        console.newline()
        if snippet.caption:
            console.print(snippet.caption, Style.DIM)
        console.code(snippet.code, snippet.language)
