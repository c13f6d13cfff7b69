# SPDX-License-Identifier: MIT
"""Cross-reference checks between the registry and the documents."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sg.core.result import Err
from sg.guide.model import Document
from sg.lint.base import CheckResult
from sg.rules.model import Category
from sg.rules.registry import RuleRegistry


class ReferenceChecker:
    def __init__(
        self,
        registry: RuleRegistry,
        documents: Sequence[Document],
        *,
        disabled: Iterable[str] = (),
    ) -> None:
        self._registry = registry
        self._documents = documents
        self._disabled = frozenset(disabled)

    def check_all(self) -> list[CheckResult]:
        return [
            *self._check_refs_resolve(),
            *self._check_rules_referenced(),
            *self._check_rule_content(),
        ]

    def _check_refs_resolve(self) -> list[CheckResult]:
        results: list[CheckResult] = []
        for doc in self._documents:
            missing: list[str] = []
            for rule_id in doc.rule_refs():
                if rule_id in self._registry or rule_id in self._disabled:
                    continue
                if rule_id not in missing:
                    missing.append(rule_id)

            if not missing:
                results.append(CheckResult.success(doc.id, "all rule references resolve"))
                continue
            for rule_id in missing:
                lookup = self._registry.get(rule_id)
                hint = lookup.error.hint if isinstance(lookup, Err) else None
                results.append(
                    CheckResult.error(doc.id, f"references unknown rule '{rule_id}'", hint=hint)
                )
        return results

    def _check_rules_referenced(self) -> list[CheckResult]:
        referenced = {rule_id for doc in self._documents for rule_id in doc.rule_refs()}
        orphans = [r.id for r in self._registry if r.id not in referenced]
        if not orphans:
            return [CheckResult.success("registry", f"all {len(self._registry)} rules documented")]
        return [
            CheckResult.warning(
                rule_id,
                "orphan rule: not referenced by any section",
                hint="add it to a section's rules list",
            )
            for rule_id in orphans
        ]

    def _check_rule_content(self) -> list[CheckResult]:
        results: list[CheckResult] = []
        for rule in self._registry:
            if not rule.description.strip():
                results.append(CheckResult.error(rule.id, "rule has no description"))
            if rule.category == Category.NAMING and not rule.good_names:
                results.append(
                    CheckResult.error(
                        rule.id,
                        "naming rule has no 'do' example",
                        hint="add [rule.names] with a do list",
                    )
                )
        return results
