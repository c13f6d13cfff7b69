from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

RULES_FILE_NAME = "rules.toml"
DOCUMENTS_DIR_NAME = "documents"


@dataclass(frozen=True, slots=True)
class GuideSource:
    """Where the rule registry and the documents are read from."""

    root: Path
    bundled: bool = False

    @property
    def rules_path(self) -> Path:
        return self.root / RULES_FILE_NAME

    @property
    def documents_dir(self) -> Path:
        return self.root / DOCUMENTS_DIR_NAME

    def __str__(self) -> str:
        return "bundled guide" if self.bundled else str(self.root)


def default_source() -> GuideSource:
    """The guide shipped with the package (sg/data)."""
    # From sg/guide/source.py -> sg/guide -> sg -> sg/data
    return GuideSource(root=Path(__file__).parent.parent / "data", bundled=True)


def source_from(directory: Path) -> GuideSource:
    return GuideSource(root=directory)
