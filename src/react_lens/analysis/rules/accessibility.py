"""Accessibility checks on JSX elements."""

from __future__ import annotations

import tree_sitter

from react_lens.analysis.rules.base import RuleModule
from react_lens.analysis.schemas import Diagnostic, FileContext
from react_lens.analysis.tree_walker import (
    find_jsx_attribute,
    get_line,
    is_jsx_element,
    jsx_attribute_name,
    jsx_attributes,
    jsx_children,
    jsx_expression_value,
    jsx_opening,
    jsx_tag_name,
    literal_text,
    node_text,
    walk_named,
)
from react_lens.constants import (
    INTERACTIVE_HANDLER_PREFIXES,
    Category,
    RuleId,
    Severity,
)


def _is_interactive_handler(name: str) -> bool:
    return name.startswith(INTERACTIVE_HANDLER_PREFIXES)


def _has_text_content(element: tree_sitter.Node) -> bool:
    """Visible text or a literal ``{...}`` child; nested elements don't count."""
    for child in jsx_children(element):
        if child.type == "jsx_text" and node_text(child).strip():
            return True
        if child.type == "jsx_expression":
            value = jsx_expression_value(child)
            if value is not None and literal_text(value).strip():
                return True
    return False


class AccessibilityRules(RuleModule):
    category = Category.ACCESSIBILITY

    def check(
        self, root: tree_sitter.Node, context: FileContext
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []

        for node in walk_named(root):
            if not is_jsx_element(node):
                continue
            opening = jsx_opening(node)
            if opening is None:
                continue
            tag = jsx_tag_name(opening)
            line = get_line(node)

            if tag == "img" and find_jsx_attribute(opening, "alt") is None:
                diagnostics.append(
                    self.diagnostic(
                        context,
                        RuleId.IMG_WITHOUT_ALT,
                        Severity.ERROR,
                        line,
                        "<img> tag is missing alt attribute.",
                    )
                )

            if (
                tag == "button"
                and find_jsx_attribute(opening, "aria-label") is None
                and not _has_text_content(node)
            ):
                diagnostics.append(
                    self.diagnostic(
                        context,
                        RuleId.BUTTON_WITHOUT_LABEL,
                        Severity.ERROR,
                        line,
                        "<button> has no visible text content or aria-label.",
                    )
                )

            if tag == "a" and find_jsx_attribute(opening, "href") is None:
                diagnostics.append(
                    self.diagnostic(
                        context,
                        RuleId.ANCHOR_WITHOUT_HREF,
                        Severity.ERROR,
                        line,
                        "<a> tag is missing href attribute.",
                    )
                )

            if tag in ("div", "span"):
                interactive = any(
                    _is_interactive_handler(jsx_attribute_name(attr))
                    for attr in jsx_attributes(opening)
                )
                if interactive and find_jsx_attribute(opening, "role") is None:
                    diagnostics.append(
                        self.diagnostic(
                            context,
                            RuleId.MISSING_ARIA_ROLE,
                            Severity.ERROR,
                            line,
                            f"Interactive <{tag}> should include a role "
                            "attribute.",
                        )
                    )

        return diagnostics
