"""Shared test fixtures — fake transport, app state, TSX sources."""

import os

# Force a demo API key for all tests. No real LLM calls are made.
# Set unconditionally at import time, so even a real key in your shell
# environment is overwritten before any Settings() is created.
os.environ["GOOGLE_API_KEY"] = "for-demo-purposes-only"

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from react_lens.analysis.schemas import FileContext
from react_lens.config import Settings
from react_lens.main import app
from react_lens.remediation.client import RemediationClient
from react_lens.remediation.fakes import FakeGenerationTransport
from react_lens.store.share_store import ShareStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_APP = FIXTURES_DIR / "sample_app"

TEST_MODEL_CHAIN = ["model-a", "model-b", "model-c"]


def make_context(code: str, file_path: str = "Component.tsx") -> FileContext:
    return FileContext(file_path=file_path, content=code)


def make_settings(**overrides: object) -> Settings:
    """Settings with a short, predictable model chain."""
    values: dict[str, object] = {
        "google_api_key": "test-key",
        "litellm_model_chain": list(TEST_MODEL_CHAIN),
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


def setup_test_app(
    transport: FakeGenerationTransport | None = None,
    settings: Settings | None = None,
) -> tuple[ShareStore, FakeGenerationTransport]:
    """Populate app.state the way the lifespan does.

    ASGITransport does not run the lifespan, so API fixtures call this
    before building a client.
    """
    cfg = settings or make_settings()
    fake = transport or FakeGenerationTransport()
    store = ShareStore(
        ttl_seconds=cfg.share_ttl_seconds,
        max_entries=cfg.share_max_entries,
    )
    app.state.settings = cfg
    app.state.share_store = store
    app.state.remediation = RemediationClient(cfg, transport=fake)
    return store, fake


@pytest.fixture
def sample_app() -> Path:
    return SAMPLE_APP


@pytest.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    setup_test_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as c:
        yield c
