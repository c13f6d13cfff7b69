from __future__ import annotations

from sg.guide.model import FolderTree

_TEE = "├── "
_ELBOW = "└── "
_PIPE = "│   "
_BLANK = "    "


def render_tree(tree: FolderTree) -> str:
    """Render a folder tree as a box-drawing diagram.

    lib/
    ├── core/
    │   └── di/
    └── main.dart
    """
    lines = [_entry(tree)]
    _render_children(tree, "", lines)
    return "\n".join(lines)


def _render_children(node: FolderTree, prefix: str, lines: list[str]) -> None:
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        is_last = index == last_index
        lines.append(prefix + (_ELBOW if is_last else _TEE) + _entry(child))
        _render_children(child, prefix + (_BLANK if is_last else _PIPE), lines)


def _entry(node: FolderTree) -> str:
    if node.note:
        return f"{node.name}  # {node.note}"
    return node.name
