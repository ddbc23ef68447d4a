"""Environment-based configuration."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from react_lens.constants import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_SKIP_DIRS,
    DEFAULT_TEMPERATURE,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # LLM Provider
    google_api_key: str = ""

    # Model chain (first = primary, rest = fallbacks tried in order)
    litellm_model_chain: Annotated[list[str], NoDecode] = [
        "gemini/gemini-1.5-flash-latest",
        "gemini/gemini-1.5-flash",
        "gemini/gemini-2.0-flash-exp",
        "gemini/gemini-2.0-flash",
    ]
    llm_max_concurrency: int = 2
    llm_timeout_seconds: int = 60

    # Fix suggestions
    fix_temperature: float = DEFAULT_TEMPERATURE
    fix_max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    fix_max_suggestions: int = 10

    # Logging
    log_level: str = "INFO"

    # API
    cors_origins: str = "http://localhost:5173"

    # Repository fetching
    clone_timeout_seconds: int = 120

    # Share store
    share_ttl_seconds: int = 86_400
    share_max_entries: int = 1000

    # Discovery
    skip_directories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKIP_DIRS)
    )

    @field_validator("litellm_model_chain", mode="before")
    @classmethod
    def _parse_chain(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("litellm_model_chain")
    @classmethod
    def _validate_chain(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError(
                "litellm_model_chain must contain at least one model"
            )
        seen: set[str] = set()
        dupes: list[str] = []
        for m in v:
            if m in seen:
                dupes.append(m)
            seen.add(m)
        if dupes:
            logger.warning(
                "Duplicate models in LITELLM_MODEL_CHAIN: %s",
                ", ".join(dupes),
            )
        return v

    @property
    def default_model(self) -> str:
        """Primary model of the chain."""
        return self.litellm_model_chain[0]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
