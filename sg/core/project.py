"""Project detection and paths.

A project is the directory whose sg.toml configures rendering and checks.
The file is optional, so detection never fails for a plain checkout: without
a marker the current directory is used.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .config import CONFIG_FILE_NAME
from .result import Err, Ok, Result

__all__ = [
    "Project",
    "ProjectError",
    "ProjectSource",
    "PROJECT_ENV_VAR",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

PROJECT_ENV_VAR = "SG_ROOT"

ProjectSource = Literal["env", "marker", "cwd"]


@dataclass(frozen=True, slots=True)
class ProjectError:
    """Error when the project root cannot be resolved."""

    message: str
    searched_from: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A directory `sg` operates on."""

    root: Path
    source: ProjectSource = "marker"

    @property
    def config_path(self) -> Path:
        """Path to sg.toml (may not exist)."""
        return self.root / CONFIG_FILE_NAME

    def resolve(self, relative: str) -> Path:
        """Resolve a config-relative path against the project root."""
        path = Path(relative).expanduser()
        if path.is_absolute():
            return path
        return self.root / path

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    return (path / CONFIG_FILE_NAME).is_file()


def find_project_upward(start: Path) -> Path | None:
    """Search upward from start for a directory holding sg.toml."""
    for parent in (start, *start.parents):
        if is_project_root(parent):
            return parent
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = PROJECT_ENV_VAR,
) -> Result[Project, ProjectError]:
    """Detect the project root.

    Detection order:
    1. $SG_ROOT (must be an existing directory)
    2. Nearest ancestor of start_dir (or cwd) containing sg.toml
    3. start_dir (or cwd) itself
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            return Ok(Project(root=env_path, source="env"))
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not a directory",
                searched_from=None,
                hint=f"unset {env_var} or point it at the project root",
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is not None:
        return Ok(Project(root=found, source="marker"))

    return Ok(Project(root=search_start, source="cwd"))
