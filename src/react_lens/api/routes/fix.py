"""AI fix suggestion routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from react_lens.api.dependencies import get_remediation_client
from react_lens.api.schemas import APIResponse, FixRequest, error_response
from react_lens.remediation.client import RemediationClient
from react_lens.resilience.errors import RemediationError

router = APIRouter(prefix="/api/fix", tags=["fix"])


@router.get("")
@router.get("/status")
async def fix_status(
    client: RemediationClient = Depends(get_remediation_client),
) -> APIResponse:
    """Whether a credential is configured, and which model leads."""
    return APIResponse(success=True, data=client.status().model_dump())


@router.post("", response_model=None)
async def create_fix(
    body: FixRequest,
    client: RemediationClient = Depends(get_remediation_client),
) -> APIResponse | JSONResponse:
    """Structured fix for a diagnostic, or raw generation for a prompt."""
    try:
        if body.diagnostic is not None and body.code:
            fix = await client.fix_diagnostic(
                body.diagnostic, body.code, body.options()
            )
            return APIResponse(
                success=True,
                data=fix.model_dump(mode="json", by_alias=True),
                metadata={"model": fix.model},
            )
        if body.prompt:
            result = await client.generate(body.prompt, body.options())
            return APIResponse(
                success=True,
                data=result.model_dump(mode="json"),
                metadata={"model": result.model},
            )
    except RemediationError as exc:
        return error_response(
            exc.status_code, exc.message, {"code": str(exc.code)}
        )
    return error_response(400, "Provide diagnostic and code, or prompt.")
