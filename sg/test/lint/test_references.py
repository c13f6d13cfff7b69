from __future__ import annotations

from sg.guide.model import Document, Section
from sg.lint.base import CheckResult, CheckStatus
from sg.lint.references import ReferenceChecker
from sg.rules.model import Category, NameSubject, NamingExample, Rule
from sg.rules.registry import RuleRegistry


def _registry() -> RuleRegistry:
    return RuleRegistry(
        [
            Rule(
                id="naming.bloc-suffix",
                category=Category.NAMING,
                title="t",
                description="d",
                names=(NamingExample(NameSubject.BLOC, "AuthBloc"),),
            ),
            Rule(id="size.widget-length", category=Category.SIZE, title="t", description="d"),
        ]
    )


def _doc(*refs: str) -> Document:
    return Document(id="guide", title="G", intro="", sections=(Section(id="s", title="S", rules=refs),))


def _by_status(results: list[CheckResult], status: CheckStatus) -> list[CheckResult]:
    return [r for r in results if r.status == status]


def test_all_resolved_and_documented() -> None:
    results = ReferenceChecker(_registry(), [_doc("naming.bloc-suffix", "size.widget-length")]).check_all()

    assert all(r.status == CheckStatus.OK for r in results)
    assert [r.message for r in results] == [
        "all rule references resolve",
        "all 2 rules documented",
    ]


def test_unknown_reference_with_suggestion() -> None:
    doc = _doc("naming.bloc-suffix", "size.widget-length", "naming.bloc-sufix", "naming.bloc-sufix")

    errors = _by_status(ReferenceChecker(_registry(), [doc]).check_all(), CheckStatus.ERROR)

    assert len(errors) == 1
    assert errors[0].message == "references unknown rule 'naming.bloc-sufix'"
    assert errors[0].hint == "did you mean: naming.bloc-suffix"


def test_disabled_reference_is_not_an_error() -> None:
    doc = _doc("naming.bloc-suffix", "size.widget-length", "release.hotfix-flow")

    results = ReferenceChecker(_registry(), [doc], disabled=["release.hotfix-flow"]).check_all()

    assert not _by_status(results, CheckStatus.ERROR)


def test_orphan_rule_is_warning() -> None:
    results = ReferenceChecker(_registry(), [_doc("naming.bloc-suffix")]).check_all()

    warnings = _by_status(results, CheckStatus.WARNING)
    assert [w.name for w in warnings] == ["size.widget-length"]
    assert "orphan rule" in warnings[0].message


def test_rule_content() -> None:
    registry = RuleRegistry(
        [
            Rule(id="naming.files", category=Category.NAMING, title="t", description="d"),
            Rule(id="size.x", category=Category.SIZE, title="t", description="  "),
        ]
    )

    errors = _by_status(
        ReferenceChecker(registry, [_doc("naming.files", "size.x")]).check_all(), CheckStatus.ERROR
    )

    assert [(e.name, e.message) for e in errors] == [
        ("naming.files", "naming rule has no 'do' example"),
        ("size.x", "rule has no description"),
    ]
