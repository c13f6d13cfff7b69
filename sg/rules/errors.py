from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


RegistryErrorKind = Literal[
    "invalid_id",
    "category_mismatch",
    "duplicate_rule",
    "unknown_rule",
    "invalid_data",
    "not_found",
    "no_limit",
]


@dataclass(frozen=True, slots=True)
class RegistryError:
    kind: RegistryErrorKind
    message: str
    hint: str | None = None
    path: Path | None = None
