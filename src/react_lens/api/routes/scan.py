"""Scan routes: analyze a pasted snippet or a public GitHub repository."""

from __future__ import annotations

import asyncio
import logging
import uuid

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from react_lens.analysis.scanner import scan_snippet
from react_lens.api.dependencies import get_settings, get_share_store
from react_lens.api.schemas import (
    APIResponse,
    ScanRequest,
    ScanResponse,
    error_response,
)
from react_lens.config import Settings
from react_lens.constants import SHORT_ID_HEX_LENGTH
from react_lens.ingestion.git_connector import (
    RepoFetchError,
    scan_github_repo,
)
from react_lens.store.share_store import ShareStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scan"])


@router.post("/scan", response_model=None)
async def create_scan(
    body: ScanRequest,
    settings: Settings = Depends(get_settings),
    store: ShareStore = Depends(get_share_store),
) -> APIResponse | JSONResponse:
    """Scan ``code`` (preferred) or ``repo_url`` and optionally share it."""
    if body.code:
        result = await asyncio.to_thread(scan_snippet, body.code)
    elif body.repo_url:
        try:
            result = await scan_github_repo(body.repo_url, settings)
        except ValueError as exc:
            return error_response(400, str(exc))
        except RepoFetchError as exc:
            logger.warning(
                "event=repo_fetch_failed url=%s error=%s",
                body.repo_url,
                exc,
            )
            return error_response(502, "Failed to fetch repository.")
    else:
        return error_response(400, "Provide code or repo_url.")

    share_id: str | None = None
    if body.share:
        share_id = uuid.uuid4().hex[:SHORT_ID_HEX_LENGTH]
        store.save(share_id, result)

    logger.info(
        "event=scan_complete score=%d diagnostics=%d shared=%s",
        result.score,
        len(result.diagnostics),
        share_id is not None,
    )
    response = ScanResponse(result=result, share_id=share_id)
    return APIResponse(
        success=True,
        data=response.model_dump(mode="json", by_alias=True),
    )
