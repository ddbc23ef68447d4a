"""Bundle-size hygiene: heavy imports, unused imports, repeated strings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

import tree_sitter

from react_lens.analysis.rules.base import RuleModule
from react_lens.analysis.schemas import Diagnostic, FileContext
from react_lens.analysis.tree_walker import (
    get_line,
    node_text,
    string_value,
    walk_named,
)
from react_lens.constants import (
    HARDCODED_STRING_MAX_LENGTH,
    HARDCODED_STRING_MIN_REPEATS,
    HEAVY_LIBRARIES,
    Category,
    RuleId,
    Severity,
)

# Node types that count as an occurrence of a name. Name-based only:
# shadowing and scopes are not resolved.
_IDENTIFIER_TYPES = frozenset(
    {
        "identifier",
        "property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "type_identifier",
        "statement_identifier",
    }
)


@dataclass
class _StringStats:
    count: int
    line: int


def _import_clause(node: tree_sitter.Node) -> tree_sitter.Node | None:
    for child in node.named_children:
        if child.type == "import_clause":
            return child
    return None


def _imported_locals(clause: tree_sitter.Node) -> list[tuple[str, int]]:
    """(local name, line) for every binding an import clause introduces."""
    locals_: list[tuple[str, int]] = []
    for child in clause.named_children:
        if child.type == "identifier":
            locals_.append((node_text(child), get_line(child)))
        elif child.type == "namespace_import":
            for name in child.named_children:
                if name.type == "identifier":
                    locals_.append((node_text(name), get_line(child)))
        elif child.type == "named_imports":
            for spec in child.named_children:
                if spec.type != "import_specifier":
                    continue
                local = spec.child_by_field_name(
                    "alias"
                ) or spec.child_by_field_name("name")
                if local is not None:
                    locals_.append((node_text(local), get_line(spec)))
    return locals_


def _is_full_import(clause: tree_sitter.Node) -> bool:
    """Namespace import, or specifiers that are all default imports."""
    kinds = [child.type for child in clause.named_children]
    if "namespace_import" in kinds:
        return True
    return bool(kinds) and all(kind == "identifier" for kind in kinds)


class BundleRules(RuleModule):
    category = Category.BUNDLE

    def check(
        self, root: tree_sitter.Node, context: FileContext
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        imported: dict[str, int] = {}
        identifiers: Counter[str] = Counter()
        strings: dict[str, _StringStats] = {}

        for node in walk_named(root):
            if node.type == "import_statement":
                self._check_import(node, context, imported, diagnostics)
            elif node.type in _IDENTIFIER_TYPES:
                identifiers[node_text(node)] += 1
            elif node.type == "string":
                text = string_value(node).strip()
                if 0 < len(text) <= HARDCODED_STRING_MAX_LENGTH:
                    stats = strings.get(text)
                    if stats is None:
                        strings[text] = _StringStats(1, get_line(node))
                    else:
                        stats.count += 1

        for local, line in imported.items():
            if identifiers[local] <= 1:
                diagnostics.append(
                    self.diagnostic(
                        context,
                        RuleId.UNUSED_IMPORTS,
                        Severity.WARN,
                        line,
                        f"Imported symbol '{local}' appears unused.",
                    )
                )

        for text, stats in strings.items():
            if stats.count >= HARDCODED_STRING_MIN_REPEATS:
                diagnostics.append(
                    self.diagnostic(
                        context,
                        RuleId.HARDCODED_STRINGS,
                        Severity.WARN,
                        stats.line,
                        f"String literal '{text}' repeated {stats.count} "
                        "times; extract to a constant.",
                    )
                )

        return diagnostics

    def _check_import(
        self,
        node: tree_sitter.Node,
        context: FileContext,
        imported: dict[str, int],
        diagnostics: list[Diagnostic],
    ) -> None:
        clause = _import_clause(node)
        if clause is None:
            return
        source_node = node.child_by_field_name("source")
        source = string_value(source_node) if source_node is not None else ""
        if source in HEAVY_LIBRARIES and _is_full_import(clause):
            diagnostics.append(
                self.diagnostic(
                    context,
                    RuleId.FULL_LIBRARY_IMPORT,
                    Severity.WARN,
                    get_line(node),
                    f"Avoid full import from '{source}'. Prefer named or "
                    "path imports.",
                )
            )
        for local, line in _imported_locals(clause):
            imported[local] = line
