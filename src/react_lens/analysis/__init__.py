"""Static analysis — rule modules over tree-sitter syntax trees."""

from react_lens.analysis.scanner import (
    normalize_category,
    scan,
    scan_snippet,
)
from react_lens.analysis.schemas import (
    Diagnostic,
    FileContext,
    ScanResult,
    ScoreBreakdown,
)
from react_lens.analysis.scorer import compute_score

__all__ = [
    "Diagnostic",
    "FileContext",
    "ScanResult",
    "ScoreBreakdown",
    "compute_score",
    "normalize_category",
    "scan",
    "scan_snippet",
]
