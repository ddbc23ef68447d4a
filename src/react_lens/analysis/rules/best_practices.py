"""Coding-practice checks: logging, DOM access, component size, prop drilling."""

from __future__ import annotations

import tree_sitter

from react_lens.analysis.rules.base import RuleModule
from react_lens.analysis.schemas import Diagnostic, FileContext
from react_lens.analysis.tree_walker import (
    get_end_line,
    get_line,
    is_jsx_attribute_position,
    is_jsx_element,
    jsx_attribute_value,
    jsx_attributes,
    jsx_expression_value,
    jsx_opening,
    jsx_tag_name,
    node_text,
    walk_named,
)
from react_lens.constants import (
    DOM_QUERY_METHODS,
    LARGE_COMPONENT_MAX_LINES,
    PROPS_DRILLING_THRESHOLD,
    Category,
    RuleId,
    Severity,
)

_FUNCTION_VALUE_TYPES = frozenset(
    {"arrow_function", "function_expression", "function"}
)


def _is_capitalized(name: str) -> bool:
    return name[:1].isupper()


def _member_call(node: tree_sitter.Node) -> tuple[str, str] | None:
    """(object, property) for calls shaped like ``object.property(...)``."""
    if node.type != "call_expression":
        return None
    callee = node.child_by_field_name("function")
    if callee is None or callee.type != "member_expression":
        return None
    obj = callee.child_by_field_name("object")
    prop = callee.child_by_field_name("property")
    if obj is None or prop is None or obj.type != "identifier":
        return None
    if prop.type != "property_identifier":
        return None
    return node_text(obj), node_text(prop)


def _first_param_name(function: tree_sitter.Node) -> str | None:
    """Name of the first parameter when it is a plain identifier."""
    params = function.child_by_field_name("parameters")
    if params is None:
        return None
    candidates = [c for c in params.named_children if c.type != "comment"]
    if not candidates:
        return None
    first = candidates[0]
    if first.type in ("required_parameter", "optional_parameter"):
        first = first.child_by_field_name("pattern")
    if first is None or first.type != "identifier":
        return None
    return node_text(first)


def _bare_identifier_value(attribute: tree_sitter.Node) -> str | None:
    """Identifier name when an attribute is ``name={identifier}``."""
    value = jsx_expression_value(jsx_attribute_value(attribute))
    if value is None or value.type != "identifier":
        return None
    return node_text(value)


class BestPracticeRules(RuleModule):
    category = Category.BEST_PRACTICES

    def check(
        self, root: tree_sitter.Node, context: FileContext
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []

        for node in walk_named(root):
            call = _member_call(node)
            if call == ("console", "log"):
                diagnostics.append(
                    self.diagnostic(
                        context,
                        RuleId.CONSOLE_LOG,
                        Severity.WARN,
                        get_line(node),
                        "Remove console.log statements from production code.",
                    )
                )
            if (
                call is not None
                and call[0] == "document"
                and call[1] in DOM_QUERY_METHODS
            ):
                diagnostics.append(
                    self.diagnostic(
                        context,
                        RuleId.DIRECT_DOM_MANIPULATION,
                        Severity.WARN,
                        get_line(node),
                        "Avoid direct DOM manipulation in React components.",
                    )
                )

            large = self._large_component(node, context)
            if large is not None:
                diagnostics.append(large)

        drilling = self._count_prop_forwarding(root)
        if drilling >= PROPS_DRILLING_THRESHOLD:
            diagnostics.append(
                self.diagnostic(
                    context,
                    RuleId.PROPS_DRILLING,
                    Severity.WARN,
                    1,
                    "Props appear to be forwarded deeply across multiple "
                    "component boundaries.",
                )
            )

        return diagnostics

    def _large_component(
        self, node: tree_sitter.Node, context: FileContext
    ) -> Diagnostic | None:
        """Diagnostic for a capitalized function spanning too many lines."""
        if node.type == "function_declaration":
            name = node_text(node.child_by_field_name("name"))
            function = node
        elif node.type == "variable_declarator":
            name_node = node.child_by_field_name("name")
            value = node.child_by_field_name("value")
            if (
                name_node is None
                or name_node.type != "identifier"
                or value is None
                or value.type not in _FUNCTION_VALUE_TYPES
            ):
                return None
            name = node_text(name_node)
            function = value
        else:
            return None

        if not _is_capitalized(name):
            return None
        span = get_end_line(function) - get_line(function) + 1
        if span <= LARGE_COMPONENT_MAX_LINES:
            return None
        return self.diagnostic(
            context,
            RuleId.LARGE_COMPONENT,
            Severity.WARN,
            get_line(function),
            f"Component {name} has {span} lines; split large components.",
        )

    def _count_prop_forwarding(self, root: tree_sitter.Node) -> int:
        count = 0
        for node in walk_named(root):
            if node.type == "function_declaration":
                name = node_text(node.child_by_field_name("name"))
                param = _first_param_name(node)
                body = node.child_by_field_name("body")
                if _is_capitalized(name) and param and body is not None:
                    count += sum(
                        1
                        for child in walk_named(body)
                        if child.type == "jsx_attribute"
                        and _bare_identifier_value(child) == param
                    )

            if node.type == "jsx_expression" and is_jsx_attribute_position(
                node
            ):
                spread = jsx_expression_value(node)
                if spread is not None and spread.type == "spread_element":
                    argument = spread.named_children
                    if (
                        argument
                        and argument[0].type == "identifier"
                        and node_text(argument[0]) == "props"
                    ):
                        count += 1

            if is_jsx_element(node):
                opening = jsx_opening(node)
                if opening is None or not _is_capitalized(
                    jsx_tag_name(opening)
                ):
                    continue
                forwarded = [
                    attr
                    for attr in jsx_attributes(opening)
                    if _bare_identifier_value(attr) is not None
                ]
                if len(forwarded) > 1:
                    count += 1
        return count
