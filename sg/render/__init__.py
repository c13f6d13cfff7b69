"""Markdown rendering of the rule registry and guide documents."""

from sg.render.anchors import AnchorSet, slugify
from sg.render.markdown import (
    BANNER,
    INDEX_FILE_NAME,
    MarkdownRenderer,
    document_file_name,
    fence,
)
from sg.render.tree import render_tree

__all__ = [
    "AnchorSet",
    "BANNER",
    "INDEX_FILE_NAME",
    "MarkdownRenderer",
    "document_file_name",
    "fence",
    "render_tree",
    "slugify",
]
