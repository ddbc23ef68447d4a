"""Run the rule modules over files and score the result."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from react_lens.analysis.rules import RULE_MODULES, RuleModule
from react_lens.analysis.schemas import Diagnostic, FileContext, ScanResult
from react_lens.analysis.scorer import compute_score
from react_lens.constants import (
    CATEGORY_ALIASES,
    DEFAULT_SKIP_DIRS,
    DEFAULT_SNIPPET_PATH,
    PARSE_FAILURE_SNIPPET_LINES,
    Category,
    RuleId,
    Severity,
)
from react_lens.ingestion.discovery import discover_files

logger = logging.getLogger(__name__)


def normalize_category(value: str | None) -> Category | None:
    """Map a user-supplied category or alias to a :class:`Category`."""
    if not value:
        return None
    return CATEGORY_ALIASES.get(value.lower())


def select_rules(category: Category | None = None) -> tuple[RuleModule, ...]:
    """Rule modules matching ``category`` (all when None), in order."""
    if category is None:
        return RULE_MODULES
    return tuple(rule for rule in RULE_MODULES if rule.category == category)


def scan(
    root: Path | str,
    category: Category | None = None,
    include_snippets: bool = False,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> ScanResult:
    """Scan a directory (or a single file) and score the findings.

    A rule module failing on a file becomes one ``parse-failure``
    diagnostic for that (file, rule) pair; the scan carries on.
    """
    files = discover_files(root, skip_dirs)
    rules = select_rules(category)
    logger.info(
        "event=scan_start root=%s files=%d rules=%d",
        root,
        len(files),
        len(rules),
    )

    diagnostics: list[Diagnostic] = []
    for path in files:
        content = path.read_text(encoding="utf-8", errors="replace")
        context = FileContext(file_path=str(path), content=content)
        diagnostics.extend(run_rules(context, rules))

    if not include_snippets:
        diagnostics = [
            d.model_copy(update={"snippet": None}) for d in diagnostics
        ]

    return compute_score(sort_diagnostics(diagnostics))


def scan_snippet(
    code: str, virtual_path: str = DEFAULT_SNIPPET_PATH
) -> ScanResult:
    """Scan one in-memory source string with every rule module."""
    context = FileContext(file_path=virtual_path, content=code)
    return compute_score(sort_diagnostics(run_rules(context, RULE_MODULES)))


def run_rules(
    context: FileContext, rules: Sequence[RuleModule]
) -> list[Diagnostic]:
    """Run ``rules`` against one file with per-rule failure isolation."""
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        try:
            diagnostics.extend(rule.run(context))
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "event=rule_failed category=%s file=%s error=%s",
                rule.category,
                context.file_path,
                exc,
            )
            diagnostics.append(_parse_failure(context, rule.category, exc))
    return diagnostics


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Stable sort by (category, file_path, line)."""
    return sorted(
        diagnostics, key=lambda d: (str(d.category), d.file_path, d.line)
    )


def _parse_failure(
    context: FileContext, category: Category, error: Exception
) -> Diagnostic:
    head = context.content.split("\n")[:PARSE_FAILURE_SNIPPET_LINES]
    return Diagnostic(
        category=Category.BEST_PRACTICES,
        rule=RuleId.PARSE_FAILURE,
        severity=Severity.WARN,
        file_path=context.file_path,
        line=1,
        message=f"Failed to analyze file for {category}: {error}",
        snippet="\n".join(head),
    )
