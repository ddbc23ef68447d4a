"""Tests for fix prompt construction."""

from __future__ import annotations

from react_lens.analysis.schemas import Diagnostic
from react_lens.constants import Category, RuleId, Severity
from react_lens.prompts import FIX_SYSTEM_PROMPT, build_fix_prompt


def test_fix_prompt_layout() -> None:
    diagnostic = Diagnostic(
        category=Category.BUNDLE,
        rule=RuleId.FULL_LIBRARY_IMPORT,
        severity=Severity.WARN,
        file_path="a.ts",
        line=1,
        message="Avoid full import from 'lodash'.",
    )
    prompt = build_fix_prompt(diagnostic, 'import _ from "lodash";')
    assert prompt.splitlines() == [
        "You are fixing React/TypeScript code health issues.",
        "Rule: no-full-library-import",
        "Category: bundle",
        "Severity: warn",
        "Diagnostic message: Avoid full import from 'lodash'.",
        "Return strict JSON with keys: explanation, fixedCode.",
        "Code to fix:",
        'import _ from "lodash";',
    ]


def test_system_prompt_asks_for_json() -> None:
    assert '"fixedCode"' in FIX_SYSTEM_PROMPT
    assert '"explanation"' in FIX_SYSTEM_PROMPT
