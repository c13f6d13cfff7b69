from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Rule categories, in the order the guide presents them."""

    NAMING = "naming"
    STRUCTURE = "structure"
    SIZE = "size"
    CODE_STYLE = "code-style"
    ARCHITECTURE = "architecture"
    RELEASE = "release"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()


class NameSubject(str, Enum):
    """What kind of identifier a naming example shows."""

    FUNCTION = "function"
    CLASS = "class"
    BLOC = "bloc"
    EVENT = "event"
    STATE = "state"
    FILE = "file"
    FOLDER = "folder"
    VARIABLE = "variable"


_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def split_rule_id(rule_id: str) -> tuple[str, str] | None:
    """Split `<category>.<slug>` into its parts, or None if malformed."""
    prefix, dot, slug = rule_id.partition(".")
    if not dot or not prefix or not _SLUG_RE.match(slug):
        return None
    if not _SLUG_RE.match(prefix):
        return None
    return prefix, slug


@dataclass(frozen=True, slots=True)
class NamingExample:
    subject: NameSubject
    name: str
    good: bool = True


@dataclass(frozen=True, slots=True)
class Snippet:
    """Illustrative code block (sample model, repository, BLoC ...)."""

    language: str
    code: str
    caption: str | None = None


@dataclass(frozen=True, slots=True)
class Rule:
    """A single guide rule.

    Attributes:
        id: `<category>.<slug>`, e.g. "naming.bloc-suffix"
        category: Category the rule belongs to (must match the id prefix)
        title: Short heading
        description: One or more paragraphs of guidance
        names: "Do" / "Don't" identifier examples
        snippets: Longer code examples
        limit: Numeric threshold for size rules
        unit: Unit of `limit` ("lines", "days", ...)
    """

    id: str
    category: Category
    title: str
    description: str
    names: tuple[NamingExample, ...] = ()
    snippets: tuple[Snippet, ...] = ()
    limit: int | None = None
    unit: str | None = None

    @property
    def good_names(self) -> tuple[NamingExample, ...]:
        return tuple(n for n in self.names if n.good)

    @property
    def bad_names(self) -> tuple[NamingExample, ...]:
        return tuple(n for n in self.names if not n.good)

    @property
    def limit_text(self) -> str | None:
        if self.limit is None:
            return None
        return f"{self.limit} {self.unit}" if self.unit else str(self.limit)
