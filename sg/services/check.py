from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sg.core.config import Config
from sg.lint import (
    CheckResult,
    NamingChecker,
    ReferenceChecker,
    StructureChecker,
    SyncChecker,
)
from sg.services.guide import LoadedGuide
from sg.services.render import RenderService


@dataclass(frozen=True, slots=True)
class CheckReport:
    references: list[CheckResult]
    naming: list[CheckResult]
    structure: list[CheckResult]
    sync: list[CheckResult]

    def all_results(self) -> list[CheckResult]:
        return [*self.references, *self.naming, *self.structure, *self.sync]

    def has_errors(self) -> bool:
        return any(r.is_error for r in self.all_results())

    def counts(self) -> tuple[int, int]:
        """(errors, warnings)."""
        results = self.all_results()
        return (
            sum(1 for r in results if r.is_error),
            sum(1 for r in results if r.is_warning),
        )


class CheckService:
    def __init__(self, *, guide: LoadedGuide, config: Config, output_dir: Path) -> None:
        self._guide = guide
        self._config = config
        self._output_dir = output_dir

    def run(self) -> CheckReport:
        guide = self._guide

        reference_checker = ReferenceChecker(
            guide.registry,
            guide.documents,
            disabled=guide.disabled,
        )
        naming_checker = NamingChecker(
            guide.registry,
            extra_verbs=self._config.naming.extra_verbs,
        )
        structure_checker = StructureChecker(guide.documents)
        sync_checker = SyncChecker(RenderService(guide).render(), self._output_dir)

        return CheckReport(
            references=reference_checker.check_all(),
            naming=naming_checker.check_all(),
            structure=structure_checker.check_all(),
            sync=sync_checker.check_all(),
        )
