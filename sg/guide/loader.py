"""Load guide documents from TOML.

One file per document:

    id = "style-guide"
    title = "Flutter Style Guide"
    intro = "..."

    [[section]]
    id = "naming"
    title = "Naming"
    body = ["First paragraph.", "Second paragraph."]
    rules = ["naming.files", "naming.bloc-suffix"]
    steps = ["Do this first", "Then this"]

    [[section.snippet]]
    language = "dart"
    code = '''...'''

    [[section.tree]]
    title = "App layout"
    outline = '''
    lib/
      features/
    '''

    [[section.runbook]]
    title = "Regenerate code"
    commands = ["flutter pub get", "dart run build_runner build"]
"""

from __future__ import annotations

import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from sg.core.result import Err, Ok, Result
from sg.core.structured import (
    StrDict,
    as_str_dict,
    get_str,
    get_str_list,
    get_table_list,
    get_text,
)
from sg.guide.model import Document, NamedTree, Runbook, Section
from sg.guide.tree import parse_tree
from sg.rules.loader import parse_snippet
from sg.rules.model import Snippet


GuideErrorKind = Literal["not_found", "invalid_data", "duplicate_document", "duplicate_section"]


@dataclass(frozen=True, slots=True)
class GuideError:
    kind: GuideErrorKind
    message: str
    hint: str | None = None
    path: Path | None = None


def load_document(path: Path) -> Result[Document, GuideError]:
    try:
        data_obj: object = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(GuideError(kind="not_found", message=f"document not found: {path}", path=path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(_invalid(f"cannot read {path}: {e}", path))
    except tomllib.TOMLDecodeError as e:
        return Err(_invalid(f"invalid TOML in {path.name}: {e}", path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(_invalid("document root must be a table", path))

    return parse_document(data, path=path)


def load_documents(directory: Path) -> Result[list[Document], GuideError]:
    """Load every *.toml document in directory, sorted by file name."""
    if not directory.is_dir():
        return Err(
            GuideError(
                kind="not_found",
                message=f"documents directory not found: {directory}",
                path=directory,
            )
        )

    documents: list[Document] = []
    seen: dict[str, Path] = {}
    for path in sorted(directory.glob("*.toml")):
        result = load_document(path)
        if isinstance(result, Err):
            return result
        doc = result.value
        if doc.id in seen:
            return Err(
                GuideError(
                    kind="duplicate_document",
                    message=f"document id '{doc.id}' is used by {seen[doc.id].name} and {path.name}",
                    path=path,
                )
            )
        seen[doc.id] = path
        documents.append(doc)

    if not documents:
        return Err(
            GuideError(
                kind="not_found",
                message=f"no documents (*.toml) in {directory}",
                path=directory,
            )
        )
    return Ok(documents)


def parse_document(data: StrDict, *, path: Path | None = None) -> Result[Document, GuideError]:
    doc_id = get_str(data, "id")
    if doc_id is None:
        return Err(_invalid("document has no id", path))
    title = get_str(data, "title")
    if title is None:
        return Err(_invalid(f"document {doc_id} has no title", path))

    tables = get_table_list(data, "section") if "section" in data else []
    if tables is None:
        return Err(_invalid(f"document {doc_id}: 'section' must be an array of tables", path))

    sections: list[Section] = []
    seen: set[str] = set()
    for index, table in enumerate(tables, start=1):
        parsed = _parse_section(table, f"{doc_id} section #{index}")
        if isinstance(parsed, Err):
            return Err(_invalid(parsed.error, path))
        section = parsed.value
        if section.id in seen:
            return Err(
                GuideError(
                    kind="duplicate_section",
                    message=f"document {doc_id}: duplicate section id '{section.id}'",
                    path=path,
                )
            )
        seen.add(section.id)
        sections.append(section)

    return Ok(
        Document(
            id=doc_id,
            title=title,
            intro=get_text(data, "intro") or "",
            sections=tuple(sections),
        )
    )


def _parse_section(table: StrDict, where: str) -> Result[Section, str]:
    section_id = get_str(table, "id")
    if section_id is None:
        return Err(f"{where} has no id")
    where = f"section {section_id}"
    title = get_str(table, "title")
    if title is None:
        return Err(f"{where} has no title")

    lists: dict[str, tuple[str, ...]] = {}
    for key in ("body", "rules", "steps"):
        if key not in table:
            lists[key] = ()
            continue
        items = get_str_list(table, key)
        if items is None:
            return Err(f"{where}: {key} must be a list of strings")
        lists[key] = tuple(i.strip() for i in items if i.strip())

    snippets = _each(table, "snippet", where, _section_snippet)
    if isinstance(snippets, Err):
        return snippets
    trees = _each(table, "tree", where, _named_tree)
    if isinstance(trees, Err):
        return trees
    runbooks = _each(table, "runbook", where, _runbook)
    if isinstance(runbooks, Err):
        return runbooks

    return Ok(
        Section(
            id=section_id,
            title=title,
            body=lists["body"],
            rules=lists["rules"],
            steps=lists["steps"],
            snippets=snippets.value,
            trees=trees.value,
            runbooks=runbooks.value,
        )
    )


def _each[T](
    table: StrDict,
    key: str,
    where: str,
    parse: Callable[[StrDict, str], Result[T, str]],
) -> Result[tuple[T, ...], str]:
    if key not in table:
        return Ok(())
    items = get_table_list(table, key)
    if items is None:
        return Err(f"{where}: {key} must be an array of tables ([[section.{key}]])")
    out: list[T] = []
    for item in items:
        parsed = parse(item, where)
        if isinstance(parsed, Err):
            return parsed
        out.append(parsed.value)
    return Ok(tuple(out))


def _section_snippet(table: StrDict, where: str) -> Result[Snippet, str]:
    snippet = parse_snippet(table)
    if snippet is None:
        return Err(f"{where}: every snippet needs a non-empty code field")
    return Ok(snippet)


def _named_tree(table: StrDict, where: str) -> Result[NamedTree, str]:
    title = get_str(table, "title")
    outline = get_text(table, "outline")
    if title is None or outline is None:
        return Err(f"{where}: every tree needs a title and an outline")
    parsed = parse_tree(outline)
    if isinstance(parsed, Err):
        return Err(f"{where}: tree '{title}' {parsed.error}")
    return Ok(NamedTree(title=title, tree=parsed.value))


def _runbook(table: StrDict, where: str) -> Result[Runbook, str]:
    title = get_str(table, "title")
    commands = get_str_list(table, "commands")
    if title is None or not commands:
        return Err(f"{where}: every runbook needs a title and a non-empty commands list")
    return Ok(
        Runbook(
            title=title,
            commands=tuple(commands),
            note=get_text(table, "note"),
            language=get_str(table, "language") or "sh",
        )
    )


def _invalid(message: str, path: Path | None) -> GuideError:
    return GuideError(kind="invalid_data", message=message, path=path)
