"""Parse folder-structure outlines.

Guide data writes folder diagrams as an indented outline, two spaces per
level, directories with a trailing slash and optional `# notes`:

    lib/
      core/        # shared infrastructure
        di/
      features/
        auth/
      main.dart

The renderer turns the parsed tree into a box-drawing diagram.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sg.core.result import Err, Ok, Result
from sg.guide.model import FolderTree

INDENT = 2


@dataclass(frozen=True, slots=True)
class TreeParseError:
    line: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}"


@dataclass
class _Node:
    name: str
    note: str | None
    children: list[_Node] = field(default_factory=lambda: [])

    def freeze(self) -> FolderTree:
        return FolderTree(
            name=self.name,
            children=tuple(c.freeze() for c in self.children),
            note=self.note,
        )


def _split_note(text: str) -> tuple[str, str | None]:
    name, sep, note = text.partition("#")
    if not sep:
        return text.strip(), None
    return name.strip(), note.strip() or None


def parse_tree(text: str) -> Result[FolderTree, TreeParseError]:
    root: _Node | None = None
    # stack[d] is the most recent node at depth d
    stack: list[_Node] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue
        if "\t" in raw:
            return Err(TreeParseError(lineno, "tabs are not allowed; indent with spaces"))

        stripped = raw.lstrip(" ")
        indent = len(raw) - len(stripped)
        if indent % INDENT:
            return Err(TreeParseError(lineno, f"indentation must be a multiple of {INDENT}"))
        depth = indent // INDENT

        name, note = _split_note(stripped)
        if not name:
            return Err(TreeParseError(lineno, "entry has no name"))

        node = _Node(name=name, note=note)

        if root is None:
            if depth != 0:
                return Err(TreeParseError(lineno, "the root entry must not be indented"))
            root = node
            stack = [node]
            continue

        if depth == 0:
            return Err(TreeParseError(lineno, f"second root entry '{name}'; a tree has one root"))
        if depth > len(stack):
            return Err(TreeParseError(lineno, f"'{name}' is indented more than one level"))

        parent = stack[depth - 1]
        if not parent.name.endswith("/"):
            return Err(
                TreeParseError(lineno, f"'{parent.name}' is a file and cannot contain '{name}'")
            )

        parent.children.append(node)
        del stack[depth:]
        stack.append(node)

    if root is None:
        return Err(TreeParseError(0, "empty tree"))
    return Ok(root.freeze())
