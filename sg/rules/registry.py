"""Ordered rule registry.

The registry is the single source the renderer and the checkers read rules
from. Iteration order is registration order, which for bundled data is the
order of `[[rule]]` tables in rules.toml.
"""

from __future__ import annotations

import difflib
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import replace

from sg.core.result import Err, Ok, Result
from sg.rules.errors import RegistryError
from sg.rules.model import Category, Rule, split_rule_id


class RuleRegistry:
    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            result = self.register(rule)
            if isinstance(result, Err):
                raise ValueError(result.error.message)

    def register(self, rule: Rule) -> Result[Rule, RegistryError]:
        parts = split_rule_id(rule.id)
        if parts is None:
            return Err(
                RegistryError(
                    kind="invalid_id",
                    message=f"invalid rule id: {rule.id!r}",
                    hint="use <category>.<lower-kebab-slug>, e.g. naming.bloc-suffix",
                )
            )

        prefix, _ = parts
        if prefix != rule.category.value:
            return Err(
                RegistryError(
                    kind="category_mismatch",
                    message=(
                        f"rule {rule.id} is filed under '{rule.category.value}' "
                        f"but its id starts with '{prefix}'"
                    ),
                )
            )

        if rule.id in self._rules:
            return Err(
                RegistryError(kind="duplicate_rule", message=f"duplicate rule id: {rule.id}")
            )

        self._rules[rule.id] = rule
        return Ok(rule)

    def get(self, rule_id: str) -> Result[Rule, RegistryError]:
        rule = self._rules.get(rule_id)
        if rule is not None:
            return Ok(rule)

        close = difflib.get_close_matches(rule_id, list(self._rules), n=3, cutoff=0.6)
        hint = f"did you mean: {', '.join(close)}" if close else "run: sg rules"
        return Err(RegistryError(kind="unknown_rule", message=f"unknown rule: {rule_id}", hint=hint))

    def ids(self) -> list[str]:
        return list(self._rules)

    def by_category(self) -> dict[Category, list[Rule]]:
        grouped: dict[Category, list[Rule]] = {}
        for category in Category:
            rules = [r for r in self._rules.values() if r.category == category]
            if rules:
                grouped[category] = rules
        return grouped

    def without(self, rule_ids: Iterable[str]) -> RuleRegistry:
        """Return a copy without the given rules (unknown ids are ignored)."""
        drop = set(rule_ids)
        return RuleRegistry(r for r in self._rules.values() if r.id not in drop)

    def with_limits(self, limits: Mapping[str, int]) -> Result[RuleRegistry, RegistryError]:
        """Return a copy with numeric limits overridden."""
        for rule_id, value in limits.items():
            found = self.get(rule_id)
            if isinstance(found, Err):
                return found
            if found.value.limit is None:
                return Err(
                    RegistryError(
                        kind="no_limit",
                        message=f"rule {rule_id} has no numeric limit to override",
                        hint=f"remove {rule_id} from [rules.limits]",
                    )
                )
            if value <= 0:
                return Err(
                    RegistryError(
                        kind="invalid_data",
                        message=f"limit for {rule_id} must be positive (got {value})",
                    )
                )

        return Ok(
            RuleRegistry(
                replace(r, limit=limits[r.id]) if r.id in limits else r
                for r in self._rules.values()
            )
        )

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({len(self)} rules)"
