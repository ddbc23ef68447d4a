"""Turn diagnostics into a health score."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from react_lens.analysis.schemas import Diagnostic, ScanResult, ScoreBreakdown
from react_lens.constants import (
    ERROR_PENALTY,
    SCORE_BASE,
    WARN_PENALTY,
    Category,
    Severity,
)


def penalty(diagnostic: Diagnostic) -> int:
    return ERROR_PENALTY if diagnostic.severity == Severity.ERROR else WARN_PENALTY


def _floored(diagnostics: Iterable[Diagnostic]) -> int:
    return max(0, SCORE_BASE - sum(penalty(d) for d in diagnostics))


def compute_score(diagnostics: Sequence[Diagnostic]) -> ScanResult:
    """Score a finished diagnostic sequence.

    Scoring rules:
    - error costs 3 points, warn costs 1, starting from 100
    - overall and each category are floored at 0 independently
    - category scores are not normalized against each other, so the
      overall score is not the mean of the breakdown
    """
    breakdown = ScoreBreakdown(
        accessibility=_floored(
            d for d in diagnostics if d.category == Category.ACCESSIBILITY
        ),
        best_practices=_floored(
            d for d in diagnostics if d.category == Category.BEST_PRACTICES
        ),
        bundle=_floored(
            d for d in diagnostics if d.category == Category.BUNDLE
        ),
    )
    return ScanResult(
        score=_floored(diagnostics),
        breakdown=breakdown,
        diagnostics=tuple(diagnostics),
    )
