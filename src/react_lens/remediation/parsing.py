"""Recover a structured fix from free-form model output."""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any

# Whole value wrapped in a fence, language tag optional
_WRAPPING_FENCE_RE = re.compile(
    r"^```[\w+.-]*[ \t]*\r?\n(.*?)\r?\n?[ \t]*```$",
    re.DOTALL,
)
# First fenced block anywhere in the text
_FENCE_BLOCK_RE = re.compile(
    r"```[\w+.-]*[ \t]*\r?\n(.*?)```",
    re.DOTALL,
)
_JSON_TAG_LINE_RE = re.compile(r"^json[ \t]*\r?\n")


def normalize_fixed_code(code: str) -> str:
    """Strip a wrapping fence and a leading ``json`` line from code."""
    text = code.strip()
    match = _WRAPPING_FENCE_RE.match(text)
    if match:
        text = match.group(1)
    text = _JSON_TAG_LINE_RE.sub("", text, count=1)
    return text.strip()


def parse_structured_fix(text: str) -> tuple[str, str] | None:
    """Return (explanation, fixedCode) from model output, or None.

    Tried in order: the whole trimmed text, the inside of a fenced
    block, the span from the first ``{`` to the last ``}``.
    """
    stripped = text.strip()
    extractors: list[Callable[[str], str | None]] = [
        lambda s: s,
        _fenced_inner,
        _brace_span,
    ]
    for extract in extractors:
        candidate = extract(stripped)
        if candidate is None:
            continue
        parsed = _load_fix_object(candidate)
        if parsed is not None:
            return parsed
    return None


def _fenced_inner(text: str) -> str | None:
    match = _WRAPPING_FENCE_RE.match(text) or _FENCE_BLOCK_RE.search(text)
    return match.group(1) if match else None


def _brace_span(text: str) -> str | None:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]


def _load_fix_object(candidate: str) -> tuple[str, str] | None:
    """Parse JSON carrying non-empty ``explanation`` and ``fixedCode`` strings."""
    try:
        data: Any = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    explanation = data.get("explanation")
    fixed_code = data.get("fixedCode")
    if not isinstance(explanation, str) or not isinstance(fixed_code, str):
        return None
    if not explanation or not fixed_code:
        return None
    return explanation, fixed_code
