"""Tests for the best-practices rule module."""

from __future__ import annotations

from react_lens.analysis.rules import BestPracticeRules
from react_lens.analysis.schemas import Diagnostic
from react_lens.constants import Category, RuleId, Severity
from tests.conftest import make_context


def _run(code: str) -> list[Diagnostic]:
    return BestPracticeRules().run(make_context(code))


def _rules(code: str) -> list[str]:
    return [d.rule for d in _run(code)]


def _component(name: str, body_lines: int, arrow: bool = False) -> str:
    head = (
        f"const {name} = () => {{\n" if arrow else f"function {name}() {{\n"
    )
    return head + "  const a = 1;\n" * body_lines + "  return null;\n}\n"


class TestConsoleLog:
    def test_console_log_flagged(self) -> None:
        (d,) = _run("function f() {\n  console.log('x');\n}\n")
        assert d.rule == RuleId.CONSOLE_LOG
        assert d.severity == Severity.WARN
        assert d.category == Category.BEST_PRACTICES
        assert d.line == 2
        assert d.message == (
            "Remove console.log statements from production code."
        )

    def test_other_console_methods_ignored(self) -> None:
        assert _run("console.error('x');\nconsole.warn('y');\n") == []


class TestDomAccess:
    def test_get_element_by_id_and_query_selector(self) -> None:
        diagnostics = _run(
            "document.getElementById('root');\n"
            "document.querySelector('.x');\n"
        )
        assert [(d.rule, d.line) for d in diagnostics] == [
            (RuleId.DIRECT_DOM_MANIPULATION, 1),
            (RuleId.DIRECT_DOM_MANIPULATION, 2),
        ]

    def test_query_selector_all_not_flagged(self) -> None:
        assert _run("document.querySelectorAll('.x');\n") == []

    def test_other_objects_not_flagged(self) -> None:
        assert _run("el.querySelector('.x');\n") == []


class TestLargeComponent:
    def test_large_function_component(self) -> None:
        (d,) = _run(_component("Dashboard", 200))
        assert d.rule == RuleId.LARGE_COMPONENT
        assert d.line == 1
        assert d.message == (
            "Component Dashboard has 203 lines; split large components."
        )

    def test_large_arrow_component(self) -> None:
        assert _rules(_component("Dashboard", 200, arrow=True)) == [
            RuleId.LARGE_COMPONENT
        ]

    def test_exactly_at_limit_not_flagged(self) -> None:
        # 1 header + 197 body + return + closing brace = 200 lines
        assert _run(_component("Dashboard", 197)) == []

    def test_lowercase_function_ignored(self) -> None:
        assert _run(_component("helper", 300)) == []


class TestPropsDrilling:
    def test_forwarded_props_flagged(self) -> None:
        diagnostics = _run(
            "function Parent(props) {\n"
            "  return <Child a={props} b={props} c={props} />;\n"
            "}\n"
        )
        assert [(d.rule, d.line) for d in diagnostics] == [
            (RuleId.PROPS_DRILLING, 1)
        ]

    def test_spread_props_flagged(self) -> None:
        code = (
            "const A = (props) => (\n"
            "  <div>\n"
            "    <div {...props} />\n"
            "    <div {...props} />\n"
            "    <div {...props} />\n"
            "  </div>\n"
            ");\n"
        )
        assert _rules(code) == [RuleId.PROPS_DRILLING]

    def test_below_threshold(self) -> None:
        code = (
            "function Parent(props) {\n"
            "  return <Child a={props.a} />;\n"
            "}\n"
        )
        assert _run(code) == []

    def test_typed_parameter(self) -> None:
        code = (
            "function Parent(props: Props) {\n"
            "  return <Child a={props} b={props} c={props} />;\n"
            "}\n"
        )
        assert _rules(code) == [RuleId.PROPS_DRILLING]
