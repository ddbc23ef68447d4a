"""Syntax-tree traversal plus location, snippet and JSX helpers."""

from __future__ import annotations

from collections.abc import Iterator

import tree_sitter

_JSX_OPENING_TYPES = frozenset({"jsx_opening_element", "jsx_self_closing_element"})
_JSX_ATTRIBUTE_TYPES = frozenset({"jsx_attribute", "jsx_expression"})
_LITERAL_TYPES = frozenset({"string", "number", "true", "false", "null", "regex"})


def walk(node: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Yield ``node`` and every descendant in pre-order (document order).

    Never prunes: each node is produced exactly once. Anonymous tokens
    (punctuation, keywords) are included, and a keyword can share its
    ``type`` with a named node: the ``string`` in ``x: string`` is an
    anonymous token, not a string literal. Rules matching on ``type``
    should use :func:`walk_named`.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def walk_named(node: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Like :func:`walk`, restricted to named nodes."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.is_named:
            yield current
        stack.extend(reversed(current.named_children))


def get_line(node: tree_sitter.Node | None) -> int:
    """First source line of ``node`` (1-based); 1 when unknown."""
    if node is None:
        return 1
    return node.start_point[0] + 1


def get_end_line(node: tree_sitter.Node) -> int:
    """Last source line of ``node`` (1-based)."""
    return node.end_point[0] + 1


def slice_snippet(content: str, line: int) -> str:
    """Return the line above through the line below ``line``, clamped."""
    lines = content.split("\n")
    start = max(0, line - 2)
    end = min(len(lines), line + 1)
    return "\n".join(lines[start:end])


def node_text(node: tree_sitter.Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def string_value(node: tree_sitter.Node) -> str:
    """Contents of a ``string`` node without its quotes (escapes kept raw)."""
    return node_text(node)[1:-1]


# ── JSX ──────────────────────────────────────────────────


def jsx_opening(element: tree_sitter.Node) -> tree_sitter.Node | None:
    """Opening tag of an element; a self-closing element is its own tag."""
    if element.type == "jsx_self_closing_element":
        return element
    if element.type == "jsx_element":
        for child in element.named_children:
            if child.type == "jsx_opening_element":
                return child
    return None


def jsx_children(element: tree_sitter.Node) -> list[tree_sitter.Node]:
    """Content nodes between the opening and closing tag."""
    if element.type != "jsx_element":
        return []
    return [
        child
        for child in element.named_children
        if child.type not in ("jsx_opening_element", "jsx_closing_element")
    ]


def jsx_tag_name(opening: tree_sitter.Node) -> str:
    """Tag name as written (``img``, ``Foo.Bar``, ``svg:rect``); fragments give ''."""
    return node_text(opening.child_by_field_name("name"))


def jsx_attributes(opening: tree_sitter.Node) -> list[tree_sitter.Node]:
    """``jsx_attribute`` and spread (``jsx_expression``) nodes of a tag."""
    return [
        child
        for child in opening.named_children
        if child.type in _JSX_ATTRIBUTE_TYPES
    ]


def jsx_attribute_name(attribute: tree_sitter.Node) -> str:
    if attribute.type != "jsx_attribute" or not attribute.named_children:
        return ""
    return node_text(attribute.named_children[0])


def jsx_attribute_value(attribute: tree_sitter.Node) -> tree_sitter.Node | None:
    """Value node of ``name=value``; None for bare boolean attributes."""
    if attribute.type != "jsx_attribute":
        return None
    named = attribute.named_children
    return named[1] if len(named) > 1 else None


def find_jsx_attribute(
    opening: tree_sitter.Node, name: str
) -> tree_sitter.Node | None:
    for attribute in jsx_attributes(opening):
        if jsx_attribute_name(attribute) == name:
            return attribute
    return None


def jsx_expression_value(
    expression: tree_sitter.Node | None,
) -> tree_sitter.Node | None:
    """Inner node of ``{...}``, skipping comments; None when empty."""
    if expression is None or expression.type != "jsx_expression":
        return None
    for child in expression.named_children:
        if child.type != "comment":
            return child
    return None


def is_jsx_element(node: tree_sitter.Node) -> bool:
    return node.type in ("jsx_element", "jsx_self_closing_element")


def is_jsx_attribute_position(node: tree_sitter.Node) -> bool:
    """True when ``node`` sits among a tag's attributes."""
    parent = node.parent
    return parent is not None and parent.type in _JSX_OPENING_TYPES


def literal_text(node: tree_sitter.Node) -> str:
    """String form of a literal node; '' for null and non-literals."""
    if node.type == "string":
        return string_value(node)
    if node.type == "null" or node.type not in _LITERAL_TYPES:
        return ""
    return node_text(node)
