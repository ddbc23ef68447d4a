"""Shared constants — single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON payloads,
sorting, CLI output) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class Category(StrEnum):
    """The three fixed analysis domains.

    Declaration order is the rule-module registration order.
    """

    ACCESSIBILITY = "accessibility"
    BEST_PRACTICES = "best-practices"
    BUNDLE = "bundle"


class Severity(StrEnum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARN = "warn"


class RuleId(StrEnum):
    """Rule identifiers emitted on diagnostics."""

    IMG_WITHOUT_ALT = "no-img-without-alt"
    BUTTON_WITHOUT_LABEL = "no-button-without-label"
    ANCHOR_WITHOUT_HREF = "no-anchor-without-href"
    MISSING_ARIA_ROLE = "no-missing-aria-role"
    CONSOLE_LOG = "no-console-log"
    DIRECT_DOM_MANIPULATION = "no-direct-dom-manipulation"
    LARGE_COMPONENT = "no-large-component"
    PROPS_DRILLING = "no-props-drilling"
    FULL_LIBRARY_IMPORT = "no-full-library-import"
    UNUSED_IMPORTS = "no-unused-imports"
    HARDCODED_STRINGS = "no-hardcoded-strings"
    PARSE_FAILURE = "parse-failure"


class ErrorCode(StrEnum):
    """Machine-readable codes for remediation failures."""

    MISSING_API_KEY = "MISSING_API_KEY"
    INVALID_API_KEY = "INVALID_API_KEY"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    SAFETY_BLOCKED = "SAFETY_BLOCKED"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


# User-facing aliases accepted by --category and the API
CATEGORY_ALIASES: dict[str, Category] = {
    "a11y": Category.ACCESSIBILITY,
    "accessibility": Category.ACCESSIBILITY,
    "best": Category.BEST_PRACTICES,
    "best-practices": Category.BEST_PRACTICES,
    "practices": Category.BEST_PRACTICES,
    "bundle": Category.BUNDLE,
    "performance": Category.BUNDLE,
}

# ── Scoring ──────────────────────────────────────────────

SCORE_BASE = 100
ERROR_PENALTY = 3
WARN_PENALTY = 1

# ── Source Files ─────────────────────────────────────────

SOURCE_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx"})
DEFAULT_SKIP_DIRS = (
    "node_modules",
    "dist",
    "build",
    "coverage",
    ".next",
    ".git",
    "out",
)
DEFAULT_SNIPPET_PATH = "snippet.tsx"
PARSE_FAILURE_SNIPPET_LINES = 3

# ── Rule Thresholds ──────────────────────────────────────

LARGE_COMPONENT_MAX_LINES = 200
PROPS_DRILLING_THRESHOLD = 3
HARDCODED_STRING_MAX_LENGTH = 80
HARDCODED_STRING_MIN_REPEATS = 3

INTERACTIVE_HANDLER_PREFIXES = ("onClick", "onKey", "onMouse")
HEAVY_LIBRARIES = frozenset({"lodash", "moment", "ramda"})
DOM_QUERY_METHODS = frozenset({"getElementById", "querySelector"})

# ── Remediation ──────────────────────────────────────────

AI_PROVIDER = "google-gemini"
DEFAULT_TEMPERATURE = 0.1
DEFAULT_MAX_OUTPUT_TOKENS = 1200
MAX_OUTPUT_TOKENS_LIMIT = 8192

# Substrings (lowercased) marking a model the upstream does not serve
MODEL_UNSUPPORTED_MARKERS = (
    "not found",
    "404",
    "is not found for api version",
)

# ── Retry Strategy ───────────────────────────────────────

RETRY_MAX_ATTEMPTS = 3
RETRY_INITIAL_WAIT = 2
RETRY_MAX_WAIT = 30

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200
SHORT_ID_HEX_LENGTH = 8
