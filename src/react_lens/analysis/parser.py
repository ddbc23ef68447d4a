"""Parse JSX-capable source text with the tree-sitter TSX grammar."""

from __future__ import annotations

import tree_sitter
import tree_sitter_typescript


class SourceParseError(Exception):
    """Raised when source text does not parse cleanly."""

    def __init__(self, message: str, line: int = 1, column: int = 1) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


def parse_source(text: str) -> tree_sitter.Tree:
    """Parse ``text`` and return the syntax tree.

    tree-sitter always produces a tree, recovering from bad input with
    ERROR and MISSING nodes. Any such node makes the parse a failure here.
    """
    tree = _get_parser().parse(text.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        raise _describe_error(root)
    return tree


def _describe_error(root: tree_sitter.Node) -> SourceParseError:
    """Build an error for the first ERROR or MISSING node in the tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_missing:
            row, col = node.start_point
            return SourceParseError(
                f"Missing '{node.type}' at line {row + 1}, "
                f"column {col + 1}",
                line=row + 1,
                column=col + 1,
            )
        if node.is_error:
            row, col = node.start_point
            return SourceParseError(
                f"Unexpected token at line {row + 1}, column {col + 1}",
                line=row + 1,
                column=col + 1,
            )
        # Only descend into subtrees that contain the error
        stack.extend(
            child for child in reversed(node.children) if child.has_error
        )
    return SourceParseError("Source could not be parsed")


# ---------------------------------------------------------------------------
# Parser cache
# ---------------------------------------------------------------------------

_parser_cache: dict[str, tree_sitter.Parser] = {}


def _get_parser() -> tree_sitter.Parser:
    """Get or create the cached TSX parser."""
    if "tsx" not in _parser_cache:
        lang = tree_sitter.Language(tree_sitter_typescript.language_tsx())
        _parser_cache["tsx"] = tree_sitter.Parser(lang)
    return _parser_cache["tsx"]
