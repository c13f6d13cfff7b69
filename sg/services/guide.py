"""Load the guide a project uses: rule registry plus documents.

Project settings are applied here, once: disabled rules are removed from the
registry and numeric limits are overridden, so the renderer and the checkers
only ever see the effective rule set.
"""

from __future__ import annotations

from dataclasses import dataclass

from sg.core.config import Config
from sg.core.project import Project
from sg.core.result import Err, Ok, Result
from sg.guide.loader import GuideError, load_documents
from sg.guide.model import Document, Runbook
from sg.guide.source import GuideSource, default_source, source_from
from sg.rules.errors import RegistryError
from sg.rules.loader import load_registry
from sg.rules.registry import RuleRegistry

type LoadError = GuideError | RegistryError


@dataclass(frozen=True, slots=True)
class LoadedGuide:
    source: GuideSource
    registry: RuleRegistry
    documents: tuple[Document, ...]
    disabled: tuple[str, ...] = ()

    def runbooks(self, query: str | None = None) -> list[tuple[Document, Runbook]]:
        """Runbooks whose title contains query (case-insensitive), in document order."""
        needle = (query or "").strip().lower()
        return [
            (doc, runbook)
            for doc in self.documents
            for runbook in doc.runbooks()
            if needle in runbook.title.lower()
        ]


class GuideService:
    def __init__(self, *, config: Config, project: Project) -> None:
        self._config = config
        self._project = project

    def source(self) -> GuideSource:
        if self._config.guide.source is None:
            return default_source()
        return source_from(self._project.resolve(self._config.guide.source))

    def load(self) -> Result[LoadedGuide, LoadError]:
        source = self.source()
        if not source.root.is_dir():
            return Err(
                GuideError(
                    kind="not_found",
                    message=f"guide source not found: {source.root}",
                    hint="fix [guide] source in sg.toml",
                    path=source.root,
                )
            )

        loaded = load_registry(source.rules_path)
        if isinstance(loaded, Err):
            return loaded
        full = loaded.value

        disabled = self._config.rules.disabled
        for rule_id in disabled:
            if rule_id not in full:
                lookup = full.get(rule_id)
                hint = lookup.error.hint if isinstance(lookup, Err) else None
                return Err(
                    RegistryError(
                        kind="unknown_rule",
                        message=f"[rules] disabled lists unknown rule: {rule_id}",
                        hint=hint,
                    )
                )

        limited = full.without(disabled).with_limits(
            {k: v for k, v in self._config.rules.limits.items() if k not in disabled}
        )
        if isinstance(limited, Err):
            return limited

        documents = load_documents(source.documents_dir)
        if isinstance(documents, Err):
            return documents

        return Ok(
            LoadedGuide(
                source=source,
                registry=limited.value,
                documents=tuple(documents.value),
                disabled=disabled,
            )
        )
