"""Render the rule registry and guide documents as Markdown.

Output is deterministic: the same registry and documents always produce the
same bytes, which is what `sg render --check` and the sync checker rely on.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from sg.guide.model import Document, Runbook, Section
from sg.render.anchors import AnchorSet
from sg.render.tree import render_tree
from sg.rules.model import NamingExample, Rule, Snippet
from sg.rules.registry import RuleRegistry

BANNER = "<!-- Generated by `sg render`. Edit the guide data, not this file. -->"
INDEX_FILE_NAME = "rules.md"

_BACKTICKS_RE = re.compile(r"`+")


def document_file_name(doc: Document) -> str:
    return f"{doc.id}.md"


def fence(code: str, language: str = "") -> str:
    """Wrap code in a fenced block longer than any backtick run inside it."""
    longest = max((len(m.group()) for m in _BACKTICKS_RE.finditer(code)), default=0)
    marker = "`" * max(3, longest + 1)
    return f"{marker}{language}\n{code}\n{marker}"


def _inline_code(text: str) -> str:
    if "`" in text:
        return f"`` {text} ``"
    return f"`{text}`"


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def _finish(blocks: Sequence[str]) -> str:
    return "\n\n".join(b for b in blocks if b).rstrip() + "\n"


class MarkdownRenderer:
    def __init__(self, registry: RuleRegistry) -> None:
        self._registry = registry

    def section_anchors(self, doc: Document) -> dict[str, str]:
        """Map section id -> anchor, accounting for every heading in the file."""
        anchors = AnchorSet()
        anchors.add(doc.title)
        anchors.add("Contents")
        result: dict[str, str] = {}
        for section in doc.sections:
            result[section.id] = anchors.add(section.title)
            for rule in self._section_rules(section):
                anchors.add(rule.title)
            for runbook in section.runbooks:
                anchors.add(runbook.title)
        return result

    def render_document(self, doc: Document) -> str:
        blocks: list[str] = [BANNER, f"# {doc.title}"]
        if doc.intro:
            blocks.append(doc.intro)

        anchors = self.section_anchors(doc)
        if doc.sections:
            toc = "\n".join(f"- [{s.title}](#{anchors[s.id]})" for s in doc.sections)
            blocks.extend(["## Contents", toc])

        for section in doc.sections:
            blocks.extend(self._section_blocks(section))

        return _finish(blocks)

    def render_rule(self, rule: Rule) -> str:
        return _finish(self._rule_blocks(rule))

    def render_index(self, documents: Sequence[Document]) -> str:
        """Table of every registered rule and where it is documented."""
        where: dict[str, list[str]] = {}
        for doc in documents:
            anchors = self.section_anchors(doc)
            for section in doc.sections:
                for rule_id in section.rules:
                    link = f"[{doc.title}]({document_file_name(doc)}#{anchors[section.id]})"
                    links = where.setdefault(rule_id, [])
                    if link not in links:
                        links.append(link)

        rows = [
            "| Rule | Category | Title | Documented in |",
            "| --- | --- | --- | --- |",
        ]
        for rule in self._registry:
            documented = ", ".join(where.get(rule.id, [])) or "-"
            rows.append(
                f"| `{rule.id}` | {rule.category.label} | {_cell(rule.title)} | {documented} |"
            )

        return _finish([BANNER, "# Rule index", f"{len(self._registry)} rules.", "\n".join(rows)])

    def _section_rules(self, section: Section) -> list[Rule]:
        # Ids missing from the registry are disabled rules; checks report typos.
        rules: list[Rule] = []
        for rule_id in section.rules:
            found = self._registry.get(rule_id)
            if found.is_ok():
                rules.append(found.unwrap())
        return rules

    def _section_blocks(self, section: Section) -> list[str]:
        blocks: list[str] = [f"## {section.title}", *section.body]

        for named in section.trees:
            blocks.append(f"**{named.title}**")
            blocks.append(fence(render_tree(named.tree), "text"))

        if section.steps:
            blocks.append(
                "\n".join(f"{n}. {step}" for n, step in enumerate(section.steps, start=1))
            )

        for snippet in section.snippets:
            blocks.extend(_snippet_blocks(snippet))

        for rule in self._section_rules(section):
            blocks.extend(self._rule_blocks(rule, level=3))

        for runbook in section.runbooks:
            blocks.extend(_runbook_blocks(runbook))

        return blocks

    def _rule_blocks(self, rule: Rule, level: int = 2) -> list[str]:
        meta = _inline_code(rule.id)
        if rule.limit_text:
            meta += f" · Limit: {rule.limit_text}"

        blocks: list[str] = [f"{'#' * level} {rule.title}", meta]
        if rule.description:
            blocks.append(rule.description)

        if rule.good_names:
            blocks.extend(["Do:", _name_list(rule.good_names)])
        if rule.bad_names:
            blocks.extend(["Don't:", _name_list(rule.bad_names)])

        for snippet in rule.snippets:
            blocks.extend(_snippet_blocks(snippet))
        return blocks


def _name_list(names: Sequence[NamingExample]) -> str:
    return "\n".join(f"- {_inline_code(n.name)}" for n in names)


def _snippet_blocks(snippet: Snippet) -> list[str]:
    blocks: list[str] = []
    if snippet.caption:
        blocks.append(f"*{snippet.caption}*")
    blocks.append(fence(snippet.code, snippet.language))
    return blocks


def _runbook_blocks(runbook: Runbook) -> list[str]:
    blocks = [f"#### {runbook.title}", fence("\n".join(runbook.commands), runbook.language)]
    if runbook.note:
        blocks.append(runbook.note)
    return blocks
