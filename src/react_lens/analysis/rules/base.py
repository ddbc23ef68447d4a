"""Rule-module contract shared by the three analyzers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

import tree_sitter

from react_lens.analysis.parser import parse_source
from react_lens.analysis.schemas import Diagnostic, FileContext
from react_lens.analysis.tree_walker import slice_snippet
from react_lens.constants import Category, RuleId, Severity


class RuleModule(ABC):
    """Stateless analyzer mapping one file to diagnostics of one category.

    Subclasses set ``category`` and implement :meth:`check`. ``run``
    parses the file itself, so every module is independent of the others.
    """

    category: ClassVar[Category]

    def run(self, context: FileContext) -> list[Diagnostic]:
        tree = parse_source(context.content)
        return self.check(tree.root_node, context)

    @abstractmethod
    def check(
        self, root: tree_sitter.Node, context: FileContext
    ) -> list[Diagnostic]: ...

    def diagnostic(
        self,
        context: FileContext,
        rule: RuleId,
        severity: Severity,
        line: int,
        message: str,
    ) -> Diagnostic:
        """Build a diagnostic stamped with this module's category."""
        return Diagnostic(
            category=self.category,
            rule=rule,
            severity=severity,
            file_path=context.file_path,
            line=line,
            message=message,
            snippet=slice_snippet(context.content, line),
        )
