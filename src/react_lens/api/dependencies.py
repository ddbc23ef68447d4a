"""FastAPI dependency injection for app-scoped services."""

from __future__ import annotations

from fastapi import Request

from react_lens.config import Settings
from react_lens.remediation.client import RemediationClient
from react_lens.store.share_store import ShareStore


def get_settings(request: Request) -> Settings:
    """Get Settings from app.state."""
    return request.app.state.settings  # type: ignore[no-any-return]


def get_share_store(request: Request) -> ShareStore:
    """Get the share store from app.state."""
    return request.app.state.share_store  # type: ignore[no-any-return]


def get_remediation_client(request: Request) -> RemediationClient:
    """Get RemediationClient from app.state."""
    return request.app.state.remediation  # type: ignore[no-any-return]
