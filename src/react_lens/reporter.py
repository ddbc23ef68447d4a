"""Plain-text rendering of scan results for the terminal."""

from __future__ import annotations

import os
from collections import defaultdict

from react_lens.analysis.schemas import Diagnostic, ScanResult
from react_lens.remediation.schemas import FixSuggestion


def render_score_only(result: ScanResult) -> str:
    return str(result.score)


def render_full_report(
    result: ScanResult,
    verbose: bool = False,
    cwd: str | None = None,
) -> str:
    """Score, breakdown and diagnostics grouped by category."""
    base = cwd or os.getcwd()
    b = result.breakdown
    lines = [
        "React Lens Health Report",
        f"Score: {result.score}/100",
        (
            f"Breakdown: a11y {b.accessibility}/100 | "
            f"best-practices {b.best_practices}/100 | "
            f"bundle {b.bundle}/100"
        ),
    ]
    if not result.diagnostics:
        lines.append("No diagnostics found.")
        return "\n".join(lines)

    grouped: dict[str, list[Diagnostic]] = defaultdict(list)
    for d in result.diagnostics:
        grouped[d.category].append(d)

    for category, entries in grouped.items():
        lines.append("")
        lines.append(category)
        for d in entries:
            location = ""
            if verbose:
                location = f" ({_display_path(d.file_path, base)}:{d.line})"
            lines.append(f"- {d.severity} {d.rule}{location}: {d.message}")
    return "\n".join(lines)


def render_suggestion(diagnostic: Diagnostic, suggestion: FixSuggestion) -> str:
    return "\n".join(
        [
            f"{diagnostic.rule} ({diagnostic.file_path}:{diagnostic.line})",
            f"Explanation: {suggestion.explanation}",
            "Fixed code:",
            suggestion.fixed_code,
        ]
    )


def _display_path(file_path: str, base: str) -> str:
    try:
        rel = os.path.relpath(file_path, base)
    except ValueError:
        return file_path
    return rel or file_path
