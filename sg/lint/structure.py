# SPDX-License-Identifier: MIT
"""Folder-structure diagram checks.

A diagram must list each directory's children as a well-formed ordered
sequence: every entry has a usable name and no two siblings share one.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from sg.guide.model import Document, FolderTree
from sg.lint.base import CheckResult

# Dot-directories (.github/, .vscode/) are allowed alongside snake_case.
_DIR_NAME_RE = re.compile(r"^\.?[a-z][a-z0-9]*(?:_[a-z0-9]+)*$")


def entry_problems(node: FolderTree) -> list[str]:
    """Problems with a single entry's name (children not inspected)."""
    problems: list[str] = []
    bare = node.bare_name

    if not bare:
        return ["entry has an empty name"]
    if any(ch.isspace() for ch in node.name):
        problems.append(f"'{node.name}' contains whitespace")
    if "/" in bare:
        problems.append(f"'{node.name}' nests a path; list each level as its own entry")
    elif node.is_dir and not _DIR_NAME_RE.match(bare):
        problems.append(f"directory '{node.name}' is not snake_case")
    return problems


def sibling_duplicates(node: FolderTree) -> list[str]:
    """Child names that appear more than once under node, in first-seen order."""
    seen: set[str] = set()
    dupes: list[str] = []
    for child in node.children:
        key = child.bare_name
        if key in seen and key not in dupes:
            dupes.append(key)
        seen.add(key)
    return dupes


class StructureChecker:
    def __init__(self, documents: Sequence[Document]) -> None:
        self._documents = documents

    def check_all(self) -> list[CheckResult]:
        results: list[CheckResult] = []
        for doc in self._documents:
            for section in doc.sections:
                for named in section.trees:
                    label = f"{doc.id}/{section.id}: {named.title}"
                    results.extend(self._check_tree(label, named.tree))
        return results

    def _check_tree(self, label: str, tree: FolderTree) -> list[CheckResult]:
        problems: list[CheckResult] = []
        count = 0
        for _, node in tree.walk():
            count += 1
            for problem in entry_problems(node):
                problems.append(CheckResult.error(label, problem))
            for dupe in sibling_duplicates(node):
                problems.append(
                    CheckResult.error(
                        label,
                        f"'{node.name}' lists '{dupe}' more than once",
                        hint="remove the duplicate entry",
                    )
                )

        if problems:
            return problems
        return [CheckResult.success(label, f"{count} entries, well formed")]
