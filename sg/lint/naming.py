# SPDX-License-Identifier: MIT
"""Naming example checks.

Every "do" example must follow the convention of its subject (function names
begin with a verb, BLoC names end with "Bloc", ...). A "don't" example that
already follows the convention is reported as a warning: it would teach the
reader nothing.
"""

from __future__ import annotations

from collections.abc import Iterable

from sg.lint.base import CheckResult
from sg.lint.conventions import conventions
from sg.rules.model import NamingExample
from sg.rules.registry import RuleRegistry


class NamingChecker:
    def __init__(self, registry: RuleRegistry, *, extra_verbs: Iterable[str] = ()) -> None:
        self._registry = registry
        self._conventions = conventions(extra_verbs)

    def check_all(self) -> list[CheckResult]:
        results: list[CheckResult] = []
        for rule in self._registry:
            if rule.names:
                results.extend(self._check_rule(rule.id, rule.names))
        return results

    def _check_rule(self, rule_id: str, names: Iterable[NamingExample]) -> list[CheckResult]:
        problems: list[CheckResult] = []
        count = 0
        for example in names:
            count += 1
            convention = self._conventions[example.subject]
            follows = convention.matches(example.name)

            if example.good and not follows:
                problems.append(
                    CheckResult.error(
                        rule_id,
                        f"'{example.name}' is not {convention.description} "
                        f"({example.subject.value})",
                        hint="fix the example or move it to the dont list",
                    )
                )
            elif not example.good and follows:
                problems.append(
                    CheckResult.warning(
                        rule_id,
                        f"don't-example '{example.name}' already is {convention.description}",
                        hint="pick a counter-example that breaks the convention",
                    )
                )

        if problems:
            return problems
        return [CheckResult.success(rule_id, f"{count} naming example(s) consistent")]
