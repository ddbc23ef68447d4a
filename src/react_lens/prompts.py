"""LLM prompts for fix suggestions."""

from react_lens.analysis.schemas import Diagnostic

FIX_SYSTEM_PROMPT = """\
You are react-lens, a reviewer that fixes React/TypeScript code health issues \
flagged by static analysis. Keep the original behavior, change only what the \
diagnostic asks for, and answer with a single JSON object:

{"explanation": "<one or two sentences>", "fixedCode": "<complete fixed code>"}

Do not wrap the JSON or the code in markdown fences.
"""


def build_fix_prompt(diagnostic: Diagnostic, code: str) -> str:
    """User prompt describing one diagnostic and the code to fix."""
    return "\n".join(
        [
            "You are fixing React/TypeScript code health issues.",
            f"Rule: {diagnostic.rule}",
            f"Category: {diagnostic.category}",
            f"Severity: {diagnostic.severity}",
            f"Diagnostic message: {diagnostic.message}",
            "Return strict JSON with keys: explanation, fixedCode.",
            "Code to fix:",
            code,
        ]
    )
