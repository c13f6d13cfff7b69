from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sg.rules.model import Snippet


@dataclass(frozen=True, slots=True)
class FolderTree:
    """A node of a folder-structure diagram.

    Directory names end with "/". `note` is the trailing `# comment` shown
    next to the entry.
    """

    name: str
    children: tuple[FolderTree, ...] = ()
    note: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.name.endswith("/")

    @property
    def bare_name(self) -> str:
        return self.name[:-1] if self.name.endswith("/") else self.name

    def walk(self) -> Iterator[tuple[int, FolderTree]]:
        """Yield (depth, node) pairs in pre-order, root at depth 0."""
        stack: list[tuple[int, FolderTree]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            for child in reversed(node.children):
                stack.append((depth + 1, child))


@dataclass(frozen=True, slots=True)
class NamedTree:
    title: str
    tree: FolderTree


@dataclass(frozen=True, slots=True)
class Runbook:
    """Shell commands an operator copies and runs by hand."""

    title: str
    commands: tuple[str, ...]
    note: str | None = None
    language: str = "sh"


@dataclass(frozen=True, slots=True)
class Section:
    id: str
    title: str
    body: tuple[str, ...] = ()
    rules: tuple[str, ...] = ()
    snippets: tuple[Snippet, ...] = ()
    trees: tuple[NamedTree, ...] = ()
    steps: tuple[str, ...] = ()
    runbooks: tuple[Runbook, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    id: str
    title: str
    intro: str
    sections: tuple[Section, ...]

    def rule_refs(self) -> list[str]:
        """Every rule id referenced by a section, in document order."""
        return [rule_id for section in self.sections for rule_id in section.rules]

    def runbooks(self) -> list[Runbook]:
        return [rb for section in self.sections for rb in section.runbooks]
