from __future__ import annotations

from sg.guide.model import FolderTree
from sg.render.tree import render_tree


def test_render_nested_tree() -> None:
    tree = FolderTree(
        "lib/",
        (
            FolderTree("core/", (FolderTree("di/"),), note="shared"),
            FolderTree("features/", (FolderTree("auth/"), FolderTree("home/"))),
            FolderTree("main.dart"),
        ),
    )

    assert render_tree(tree) == "\n".join(
        [
            "lib/",
            "├── core/  # shared",
            "│   └── di/",
            "├── features/",
            "│   ├── auth/",
            "│   └── home/",
            "└── main.dart",
        ]
    )


def test_render_single_node() -> None:
    assert render_tree(FolderTree("toolkit/")) == "toolkit/"


def test_last_child_subtree_has_blank_prefix() -> None:
    tree = FolderTree("lib/", (FolderTree("a/", (FolderTree("b.dart"),)),))
    assert render_tree(tree).splitlines()[-1] == "    └── b.dart"
