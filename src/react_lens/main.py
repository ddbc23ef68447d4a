"""FastAPI application with lifespan startup."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

# Phase 1: singleton logging, before any react_lens imports
# (they transitively import litellm which reads LITELLM_LOG at import time)
from react_lens.logging_config import setup_logging

setup_logging()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from react_lens import __version__  # noqa: E402
from react_lens.api.routes import fix, health, scan, share  # noqa: E402
from react_lens.config import Settings  # noqa: E402
from react_lens.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
    set_package_level,
)
from react_lens.remediation.client import RemediationClient  # noqa: E402
from react_lens.store.share_store import ShareStore  # noqa: E402

# Phase 2: now that all imports (including litellm) are done,
# clear litellm's duplicate handlers.
cleanup_third_party_handlers()

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = _settings
    set_package_level(settings.log_level)

    app.state.settings = settings
    app.state.share_store = ShareStore(
        ttl_seconds=settings.share_ttl_seconds,
        max_entries=settings.share_max_entries,
    )
    app.state.remediation = RemediationClient(settings)

    if not settings.google_api_key:
        _logger.warning("event=no_google_api_key action=fix_disabled")

    yield


app = FastAPI(
    title="React Lens",
    description="React codebase health analyzer with AI fix suggestions",
    version=__version__,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

_settings = Settings()
_cors_origins = [
    o.strip()
    for o in _settings.cors_origins.split(",")
    if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)

# Routes
app.include_router(health.router)
app.include_router(scan.router)
app.include_router(share.router)
app.include_router(fix.router)
