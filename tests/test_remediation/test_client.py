"""Tests for the remediation client: fallback chain and error taxonomy."""

from __future__ import annotations

import json
import logging

import pytest

from react_lens.analysis.schemas import Diagnostic
from react_lens.constants import Category, ErrorCode, RuleId, Severity
from react_lens.prompts import FIX_SYSTEM_PROMPT
from react_lens.remediation.client import (
    FALLBACK_EXPLANATION,
    RemediationClient,
)
from react_lens.remediation.fakes import FakeGenerationTransport
from react_lens.remediation.schemas import (
    GenerationOptions,
    GenerationResponse,
    GenerationUsage,
)
from react_lens.remediation.transport import ContentFilteredError
from react_lens.resilience.errors import (
    EmptyResponseError,
    InvalidCredentialError,
    MissingCredentialError,
    QuotaExceededError,
    SafetyBlockedError,
    UpstreamError,
)
from tests.conftest import make_settings


def _client(
    outcomes: dict[str, GenerationResponse | Exception] | None = None,
    **settings: object,
) -> tuple[RemediationClient, FakeGenerationTransport]:
    transport = FakeGenerationTransport(outcomes)
    return RemediationClient(make_settings(**settings), transport), transport


def _ok(text: str, total: int = 0) -> GenerationResponse:
    return GenerationResponse(
        text=text, usage=GenerationUsage(total_tokens=total)
    )


def _diagnostic() -> Diagnostic:
    return Diagnostic(
        category=Category.ACCESSIBILITY,
        rule=RuleId.IMG_WITHOUT_ALT,
        severity=Severity.ERROR,
        file_path="App.tsx",
        line=3,
        message="<img> tag is missing alt attribute.",
        snippet='<img src="x.png" />',
    )


class TestCandidateFallback:
    async def test_first_model_answers(self) -> None:
        client, transport = _client({"model-a": _ok("hello", total=7)})
        result = await client.generate("hi")
        assert result.text == "hello"
        assert result.model == "model-a"
        assert result.usage.total_tokens == 7
        assert transport.models_called == ["model-a"]

    async def test_skips_unsupported_models(self) -> None:
        client, transport = _client({"model-c": _ok("from c")})
        result = await client.generate("hi")
        assert result.text == "from c"
        assert result.model == "model-c"
        assert transport.models_called == ["model-a", "model-b", "model-c"]

    async def test_404_counts_as_unsupported(self) -> None:
        client, transport = _client(
            {
                "model-a": Exception("404 Not Found"),
                "model-b": _ok("from b"),
            }
        )
        result = await client.generate("hi")
        assert result.model == "model-b"

    async def test_exhaustion_wraps_last_failure(self) -> None:
        client, transport = _client()
        with pytest.raises(UpstreamError) as exc_info:
            await client.generate("hi")
        assert exc_info.value.code == ErrorCode.UPSTREAM_ERROR
        assert exc_info.value.status_code == 502
        assert isinstance(exc_info.value.__cause__, LookupError)
        assert "model-c" in str(exc_info.value.__cause__)
        assert transport.models_called == ["model-a", "model-b", "model-c"]

    async def test_unsupported_model_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        client, _ = _client({"model-b": _ok("ok")})
        with caplog.at_level(
            logging.WARNING, logger="react_lens.remediation.client"
        ):
            await client.generate("hi")
        assert "event=model_unsupported model=model-a" in caplog.text


class TestErrorClassification:
    async def test_missing_key_makes_no_calls(self) -> None:
        client, transport = _client(google_api_key="")
        with pytest.raises(MissingCredentialError) as exc_info:
            await client.generate("hi")
        assert exc_info.value.status_code == 500
        assert exc_info.value.code == ErrorCode.MISSING_API_KEY
        assert transport.requests == []

    async def test_invalid_key_stops_chain(self) -> None:
        client, transport = _client(
            {"model-a": Exception("API key not valid. Please pass a valid key")}
        )
        with pytest.raises(InvalidCredentialError) as exc_info:
            await client.generate("hi")
        assert exc_info.value.status_code == 401
        assert isinstance(exc_info.value.__cause__, Exception)
        assert transport.models_called == ["model-a"]

    async def test_quota(self) -> None:
        client, transport = _client(
            {"model-a": Exception("429 RESOURCE_EXHAUSTED")}
        )
        with pytest.raises(QuotaExceededError):
            await client.generate("hi")
        assert transport.models_called == ["model-a"]

    async def test_content_filter_is_safety(self) -> None:
        client, _ = _client(
            {
                "model-a": ContentFilteredError(
                    "Response from model-a was blocked by safety filters"
                )
            }
        )
        with pytest.raises(SafetyBlockedError) as exc_info:
            await client.generate("hi")
        assert exc_info.value.code == ErrorCode.SAFETY_BLOCKED

    async def test_other_failure_is_upstream(self) -> None:
        client, transport = _client(
            {"model-a": ConnectionError("connection reset by peer")}
        )
        with pytest.raises(UpstreamError, match="connection reset"):
            await client.generate("hi")
        assert transport.models_called == ["model-a"]

    async def test_empty_response(self) -> None:
        client, transport = _client({"model-a": _ok("")})
        with pytest.raises(EmptyResponseError) as exc_info:
            await client.generate("hi")
        assert exc_info.value.status_code == 502
        assert transport.models_called == ["model-a"]

    async def test_taxonomy_error_from_transport_passes_through(self) -> None:
        client, _ = _client({"model-a": QuotaExceededError("slow down")})
        with pytest.raises(QuotaExceededError, match="slow down"):
            await client.generate("hi")


class TestRequestParameters:
    async def test_defaults_from_settings(self) -> None:
        client, transport = _client({"model-a": _ok("x")})
        await client.generate("hi")
        (request,) = transport.requests
        assert request.prompt == "hi"
        assert request.system_instruction is None
        assert request.temperature == 0.1
        assert request.max_output_tokens == 1200
        assert request.api_key == "test-key"

    async def test_options_override(self) -> None:
        client, transport = _client({"model-a": _ok("x")})
        await client.generate(
            "hi",
            GenerationOptions(
                system_prompt="be brief", temperature=0.0, max_tokens=50
            ),
        )
        (request,) = transport.requests
        assert request.system_instruction == "be brief"
        assert request.temperature == 0.0
        assert request.max_output_tokens == 50


class TestFixDiagnostic:
    async def test_structured_fix(self) -> None:
        payload = json.dumps(
            {
                "explanation": "Add alt text.",
                "fixedCode": '```tsx\n<img src="x.png" alt="Logo" />\n```',
            }
        )
        client, transport = _client({"model-a": _ok(payload)})
        result = await client.fix_diagnostic(
            _diagnostic(), '<img src="x.png" />'
        )
        assert result.model == "model-a"
        assert result.suggestion.explanation == "Add alt text."
        assert result.suggestion.fixed_code == '<img src="x.png" alt="Logo" />'

        (request,) = transport.requests
        assert request.system_instruction == FIX_SYSTEM_PROMPT
        assert "Rule: no-img-without-alt" in request.prompt
        assert "Category: accessibility" in request.prompt
        assert request.prompt.endswith('<img src="x.png" />')

    async def test_unstructured_reply_falls_back(self) -> None:
        client, _ = _client({"model-a": _ok('<img src="x.png" alt="" />')})
        result = await client.fix_diagnostic(_diagnostic(), "code")
        assert result.suggestion.explanation == FALLBACK_EXPLANATION
        assert result.suggestion.fixed_code == '<img src="x.png" alt="" />'

    async def test_custom_system_prompt_kept(self) -> None:
        client, transport = _client({"model-a": _ok("x")})
        await client.fix_diagnostic(
            _diagnostic(), "code", GenerationOptions(system_prompt="custom")
        )
        assert transport.requests[0].system_instruction == "custom"


def test_status() -> None:
    client, _ = _client()
    status = client.status()
    assert status.configured is True
    assert status.provider == "google-gemini"
    assert status.default_model == "model-a"


def test_status_without_key() -> None:
    client, _ = _client(google_api_key="")
    assert client.status().configured is False
