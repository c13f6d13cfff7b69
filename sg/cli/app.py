from __future__ import annotations

import os
from pathlib import Path

import typer

from sg import __version__
from sg.cli.commands.check import check
from sg.cli.commands.render_cmd import render
from sg.cli.commands.rules_cmd import rule, rules
from sg.cli.commands.runbook import runbook
from sg.core.errors import ErrorCode
from sg.core.project import PROJECT_ENV_VAR


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Flutter style & release guide: rule registry, renderer and self-checks.",
)


# Commands
app.command()(rules)
app.command()(rule)
app.command()(render)
app.command()(check)
app.command()(runbook)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    project: Path | None = typer.Option(
        None,
        "--project",
        help="Project root (overrides $SG_ROOT and sg.toml detection).",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if project is not None:
        try:
            root = project.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --project: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --project '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[PROJECT_ENV_VAR] = str(root)


def main() -> None:
    app()
