# SPDX-License-Identifier: MIT
"""Identifier conventions the naming examples are checked against.

Each convention is a predicate over a single identifier plus a short
description used in check messages.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from sg.rules.model import NameSubject

DEFAULT_VERBS: frozenset[str] = frozenset(
    {
        "add",
        "apply",
        "build",
        "calculate",
        "can",
        "cancel",
        "check",
        "clear",
        "close",
        "compute",
        "convert",
        "create",
        "delete",
        "dispose",
        "download",
        "emit",
        "ensure",
        "fetch",
        "filter",
        "find",
        "format",
        "get",
        "handle",
        "has",
        "hide",
        "init",
        "initialize",
        "insert",
        "is",
        "listen",
        "load",
        "log",
        "make",
        "map",
        "navigate",
        "open",
        "parse",
        "pop",
        "push",
        "read",
        "refresh",
        "register",
        "remove",
        "request",
        "reset",
        "retry",
        "save",
        "select",
        "send",
        "set",
        "should",
        "show",
        "sort",
        "start",
        "stop",
        "submit",
        "subscribe",
        "sync",
        "toggle",
        "track",
        "update",
        "upload",
        "validate",
        "watch",
        "write",
    }
)

_UPPER_CAMEL_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
_LOWER_CAMEL_RE = re.compile(r"^[a-z][A-Za-z0-9]*$")
_SNAKE_RE = re.compile(r"^[a-z][a-z0-9]*(?:_[a-z0-9]+)*$")
_DART_FILE_RE = re.compile(r"^[a-z][a-z0-9]*(?:_[a-z0-9]+)*\.dart$")
_LEADING_WORD_RE = re.compile(r"^[a-z]+")


def is_upper_camel(name: str) -> bool:
    return bool(_UPPER_CAMEL_RE.match(name))


def is_lower_camel(name: str) -> bool:
    return bool(_LOWER_CAMEL_RE.match(name.lstrip("_")))


def is_snake_case(name: str) -> bool:
    return bool(_SNAKE_RE.match(name))


def is_dart_file(name: str) -> bool:
    return bool(_DART_FILE_RE.match(name))


def leading_word(name: str) -> str | None:
    """First word of a camelCase identifier (private `_` prefix ignored)."""
    match = _LEADING_WORD_RE.match(name.lstrip("_"))
    return match.group() if match else None


def starts_with_verb(name: str, verbs: Iterable[str] = DEFAULT_VERBS) -> bool:
    word = leading_word(name)
    return word is not None and word in set(verbs)


def _has_suffix(name: str, suffix: str) -> bool:
    return is_upper_camel(name) and name.endswith(suffix) and len(name) > len(suffix)


@dataclass(frozen=True, slots=True)
class Convention:
    description: str
    matches: Callable[[str], bool]


def conventions(extra_verbs: Iterable[str] = ()) -> dict[NameSubject, Convention]:
    verbs = DEFAULT_VERBS | {v.lower() for v in extra_verbs}

    def function_name(name: str) -> bool:
        return is_lower_camel(name) and starts_with_verb(name, verbs)

    return {
        NameSubject.FUNCTION: Convention("lowerCamelCase starting with a verb", function_name),
        NameSubject.CLASS: Convention("UpperCamelCase", is_upper_camel),
        NameSubject.BLOC: Convention(
            "UpperCamelCase ending with 'Bloc'", lambda n: _has_suffix(n, "Bloc")
        ),
        NameSubject.EVENT: Convention(
            "UpperCamelCase ending with 'Event'", lambda n: _has_suffix(n, "Event")
        ),
        NameSubject.STATE: Convention(
            "UpperCamelCase ending with 'State'", lambda n: _has_suffix(n, "State")
        ),
        NameSubject.FILE: Convention("snake_case .dart file", is_dart_file),
        NameSubject.FOLDER: Convention("snake_case", lambda n: is_snake_case(n.removesuffix("/"))),
        NameSubject.VARIABLE: Convention("lowerCamelCase", is_lower_camel),
    }
