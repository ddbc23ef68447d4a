"""Request/response schemas for the HTTP API."""

from typing import Any

from pydantic import BaseModel, Field
from starlette.responses import JSONResponse

from react_lens.analysis.schemas import Diagnostic, ScanResult
from react_lens.constants import MAX_OUTPUT_TOKENS_LIMIT
from react_lens.remediation.schemas import GenerationOptions


class APIResponse(BaseModel):
    """Standard response envelope for all API endpoints."""

    success: bool
    data: Any | None = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class ScanRequest(BaseModel):
    """Request body for POST /api/scan.

    ``code`` wins when both ``code`` and ``repo_url`` are given.
    """

    code: str | None = None
    repo_url: str | None = None
    share: bool = False


class ScanResponse(BaseModel):
    result: ScanResult
    share_id: str | None = None


class FixRequest(BaseModel):
    """Request body for POST /api/fix.

    Either ``diagnostic`` plus ``code`` (structured fix) or a free-form
    ``prompt`` (raw generation).
    """

    diagnostic: Diagnostic | None = None
    code: str | None = None
    prompt: str | None = Field(default=None, min_length=1)
    system_prompt: str | None = None
    temperature: float | None = Field(default=None, ge=0, le=2)
    max_tokens: int | None = Field(
        default=None, ge=1, le=MAX_OUTPUT_TOKENS_LIMIT
    )

    def options(self) -> GenerationOptions:
        return GenerationOptions(
            system_prompt=self.system_prompt,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )


def error_response(
    status_code: int,
    error: str,
    metadata: dict[str, Any] | None = None,
) -> JSONResponse:
    """Envelope a failure with a non-2xx status."""
    body = APIResponse(success=False, error=error, metadata=metadata or {})
    return JSONResponse(status_code=status_code, content=body.model_dump())
