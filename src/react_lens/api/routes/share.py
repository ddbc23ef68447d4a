"""Shared scan lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from react_lens.api.dependencies import get_share_store
from react_lens.api.schemas import APIResponse, error_response
from react_lens.store.share_store import ShareStore

router = APIRouter(prefix="/api/share", tags=["share"])


@router.get("/{share_id}", response_model=None)
async def get_shared_scan(
    share_id: str,
    store: ShareStore = Depends(get_share_store),
) -> APIResponse | JSONResponse:
    shared = store.load(share_id)
    if shared is None:
        return error_response(404, f"Shared scan '{share_id}' not found")
    return APIResponse(
        success=True,
        data=shared.model_dump(mode="json", by_alias=True),
    )
