"""AI fix suggestions — model fallback, error taxonomy, output recovery."""

from react_lens.remediation.client import (
    FALLBACK_EXPLANATION,
    RemediationClient,
    suggestion_from_text,
)
from react_lens.remediation.schemas import (
    FixResult,
    FixSuggestion,
    GenerationOptions,
    GenerationResult,
    GenerationUsage,
    RemediationStatus,
)

__all__ = [
    "FALLBACK_EXPLANATION",
    "FixResult",
    "FixSuggestion",
    "GenerationOptions",
    "GenerationResult",
    "GenerationUsage",
    "RemediationClient",
    "RemediationStatus",
    "suggestion_from_text",
]
