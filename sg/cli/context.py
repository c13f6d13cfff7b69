from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from sg.core.config import Config, load_config
from sg.core.errors import ErrorCode
from sg.core.project import Project, detect_project
from sg.core.result import Err
from sg.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: Config
    console: ConsoleProtocol

    @property
    def output_dir(self) -> Path:
        return self.project.resolve(self.config.guide.output)


def build_context() -> CLIContext:
    console = RichConsole()

    project_result = detect_project()
    if isinstance(project_result, Err):
        console.error(project_result.error.message)
        if project_result.error.hint:
            console.print(f"hint: {project_result.error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    project = project_result.value

    config = Config()
    if project.config_path.exists():
        config_result = load_config(project.config_path)
        if isinstance(config_result, Err):
            console.error(config_result.error.message)
            if config_result.error.hint:
                console.print(f"hint: {config_result.error.hint}", Style.DIM)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        config = config_result.value

    return CLIContext(project=project, config=config, console=console)
