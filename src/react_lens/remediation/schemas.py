"""Pydantic models for fix suggestions and generation calls."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from react_lens.constants import MAX_OUTPUT_TOKENS_LIMIT
from react_lens.remediation.parsing import normalize_fixed_code


class FixSuggestion(BaseModel):
    """Explanation plus replacement code.

    ``fixed_code`` is normalized on construction, so it never carries a
    wrapping code fence or a leading ``json`` tag line.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    explanation: str
    fixed_code: str = Field(alias="fixedCode")

    @field_validator("explanation")
    @classmethod
    def _trim_explanation(cls, v: str) -> str:
        return v.strip()

    @field_validator("fixed_code")
    @classmethod
    def _normalize_code(cls, v: str) -> str:
        return normalize_fixed_code(v)


class GenerationUsage(BaseModel):
    """Token accounting; missing upstream counters read as 0."""

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0)


class GenerationOptions(BaseModel):
    """Caller-tunable generation parameters; None means "use default"."""

    system_prompt: str | None = None
    temperature: float | None = Field(default=None, ge=0, le=2)
    max_tokens: int | None = Field(
        default=None, ge=1, le=MAX_OUTPUT_TOKENS_LIMIT
    )


class GenerationRequest(BaseModel):
    """One transport call against one model candidate."""

    model: str
    prompt: str
    system_instruction: str | None = None
    temperature: float
    max_output_tokens: int
    api_key: str


class GenerationResponse(BaseModel):
    text: str
    usage: GenerationUsage = Field(default_factory=GenerationUsage)


class GenerationResult(BaseModel):
    """Outcome of prompt-based generation."""

    text: str
    usage: GenerationUsage
    model: str


class FixResult(BaseModel):
    """Outcome of a diagnostic-based fix."""

    suggestion: FixSuggestion
    usage: GenerationUsage
    model: str


class RemediationStatus(BaseModel):
    configured: bool
    provider: str
    default_model: str
