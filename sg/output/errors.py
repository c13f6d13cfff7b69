"""Error presentation utilities.

Centralized formatting and exit code mapping for guide loading errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sg.core.errors import ErrorCode
from sg.guide.loader import GuideError
from sg.output.console import Style
from sg.rules.errors import RegistryError

if TYPE_CHECKING:
    from sg.output.console import ConsoleProtocol

__all__ = ["print_load_error", "load_error_exit_code"]


def print_load_error(error: GuideError | RegistryError, console: ConsoleProtocol) -> None:
    """Print a guide/registry loading error with its location and hint."""
    match error:
        case GuideError(kind="not_found", message=message) | RegistryError(
            kind="not_found", message=message
        ):
            console.error(message)
        case RegistryError(message=message, path=path) | GuideError(message=message, path=path):
            console.error(message)
            if path is not None and str(path) not in message:
                console.print(f"in: {path}", Style.DIM)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def load_error_exit_code(error: GuideError | RegistryError) -> int:
    """Get exit code for a guide/registry loading error.

    A missing guide file or directory, rules.toml included, is an I/O error;
    anything else is bad guide data or a bad sg.toml setting.
    """
    match error:
        case GuideError(kind="not_found") | RegistryError(kind="not_found"):
            return int(ErrorCode.IO_ERROR)
        case RegistryError() | GuideError():
            return int(ErrorCode.CONFIG_ERROR)
    return int(ErrorCode.CONFIG_ERROR)
