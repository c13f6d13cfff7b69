"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from sg.core.errors import ErrorCode
from sg.core.result import Err, Result
from sg.output.console import Style
from sg.output.errors import load_error_exit_code, print_load_error
from sg.services.guide import GuideService, LoadedGuide

if TYPE_CHECKING:
    from sg.cli.context import CLIContext


def exit_on_error[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.USER_ERROR,
) -> T:
    """Return the Ok value, or print the error and exit.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))
    return result.value


def load_guide(ctx: CLIContext) -> LoadedGuide:
    """Load the project's guide or exit with the matching load error code."""
    result = GuideService(config=ctx.config, project=ctx.project).load()
    if isinstance(result, Err):
        print_load_error(result.error, ctx.console)
        raise typer.Exit(code=load_error_exit_code(result.error))
    return result.value