"""Load a rule registry from rules.toml.

Layout:

    [[rule]]
    id = "naming.bloc-suffix"
    title = "BLoC classes end with Bloc"
    description = "..."
    limit = 120            # optional
    unit = "lines"         # optional

    [rule.names]
    bloc = { do = ["AuthBloc"], dont = ["AuthManager"] }

    [[rule.snippet]]
    language = "dart"
    caption = "..."
    code = '''...'''

`category` may be given explicitly; when omitted it is taken from the id
prefix.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from sg.core.result import Err, Ok, Result
from sg.core.structured import (
    StrDict,
    as_str_dict,
    get_int,
    get_str,
    get_str_list,
    get_table,
    get_table_list,
    get_text,
)
from sg.rules.errors import RegistryError
from sg.rules.model import Category, NameSubject, NamingExample, Rule, Snippet, split_rule_id
from sg.rules.registry import RuleRegistry


def load_registry(path: Path) -> Result[RuleRegistry, RegistryError]:
    try:
        data_obj: object = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(
            RegistryError(
                kind="not_found",
                message=f"rules file not found: {path}",
                hint="add rules.toml to the guide source or unset [guide] source",
                path=path,
            )
        )
    except (OSError, UnicodeDecodeError) as e:
        return Err(_invalid(f"cannot read {path}: {e}", path))
    except tomllib.TOMLDecodeError as e:
        return Err(_invalid(f"invalid TOML in {path.name}: {e}", path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(_invalid("rules root must be a table", path))

    return parse_registry(data, path=path)


def parse_registry(data: StrDict, *, path: Path | None = None) -> Result[RuleRegistry, RegistryError]:
    tables = get_table_list(data, "rule") if "rule" in data else []
    if tables is None:
        return Err(_invalid("'rule' must be an array of tables ([[rule]])", path))

    registry = RuleRegistry()
    for index, table in enumerate(tables, start=1):
        parsed = _parse_rule(table, index)
        if isinstance(parsed, Err):
            return Err(_with_path(parsed.error, path))
        registered = registry.register(parsed.value)
        if isinstance(registered, Err):
            return Err(_with_path(registered.error, path))

    return Ok(registry)


def _parse_rule(table: StrDict, index: int) -> Result[Rule, RegistryError]:
    rule_id = get_str(table, "id")
    if rule_id is None:
        return Err(_invalid(f"rule #{index} has no id"))
    where = f"rule {rule_id}"

    title = get_str(table, "title")
    if title is None:
        return Err(_invalid(f"{where} has no title"))

    category = _category(table, rule_id)
    if isinstance(category, Err):
        return category

    limit = get_int(table, "limit")
    if "limit" in table and limit is None:
        return Err(_invalid(f"{where}: limit must be an integer"))
    if limit is not None and limit <= 0:
        return Err(_invalid(f"{where}: limit must be positive (got {limit})"))

    names = _names(table, where)
    if isinstance(names, Err):
        return names

    snippets = _snippets(table, where)
    if isinstance(snippets, Err):
        return snippets

    return Ok(
        Rule(
            id=rule_id,
            category=category.value,
            title=title,
            description=get_text(table, "description") or "",
            names=names.value,
            snippets=snippets.value,
            limit=limit,
            unit=get_str(table, "unit"),
        )
    )


def _category(table: StrDict, rule_id: str) -> Result[Category, RegistryError]:
    raw = get_str(table, "category")
    if raw is None:
        parts = split_rule_id(rule_id)
        if parts is None:
            return Err(
                RegistryError(
                    kind="invalid_id",
                    message=f"invalid rule id: {rule_id!r}",
                    hint="use <category>.<lower-kebab-slug>, e.g. naming.bloc-suffix",
                )
            )
        raw = parts[0]

    try:
        return Ok(Category(raw))
    except ValueError:
        known = ", ".join(c.value for c in Category)
        return Err(_invalid(f"rule {rule_id}: unknown category '{raw}' (known: {known})"))


def _names(table: StrDict, where: str) -> Result[tuple[NamingExample, ...], RegistryError]:
    if "names" not in table:
        return Ok(())
    names = get_table(table, "names")
    if names is None:
        return Err(_invalid(f"{where}: names must be a table"))

    examples: list[NamingExample] = []
    for key, value in names.items():
        try:
            subject = NameSubject(key)
        except ValueError:
            return Err(_invalid(f"{where}: unknown name subject '{key}'"))

        group = as_str_dict(value)
        if group is None:
            return Err(_invalid(f"{where}: names.{key} must be a table with do/dont lists"))

        for field_name, good in (("do", True), ("dont", False)):
            if field_name not in group:
                continue
            items = get_str_list(group, field_name)
            if items is None:
                return Err(_invalid(f"{where}: names.{key}.{field_name} must be a list of strings"))
            examples.extend(NamingExample(subject=subject, name=n, good=good) for n in items)

    return Ok(tuple(examples))


def _snippets(table: StrDict, where: str) -> Result[tuple[Snippet, ...], RegistryError]:
    if "snippet" not in table:
        return Ok(())
    items = get_table_list(table, "snippet")
    if items is None:
        return Err(_invalid(f"{where}: snippet must be an array of tables"))

    snippets: list[Snippet] = []
    for item in items:
        parsed = parse_snippet(item)
        if parsed is None:
            return Err(_invalid(f"{where}: every snippet needs a non-empty code field"))
        snippets.append(parsed)
    return Ok(tuple(snippets))


def parse_snippet(table: StrDict) -> Snippet | None:
    """Build a Snippet from a TOML table, or None if it has no code."""
    code = get_text(table, "code")
    if code is None:
        return None
    return Snippet(
        language=get_str(table, "language") or "text",
        code=code,
        caption=get_str(table, "caption"),
    )


def _invalid(message: str, path: Path | None = None) -> RegistryError:
    return RegistryError(kind="invalid_data", message=message, path=path)


def _with_path(error: RegistryError, path: Path | None) -> RegistryError:
    if path is None or error.path is not None:
        return error
    return RegistryError(kind=error.kind, message=error.message, hint=error.hint, path=path)
