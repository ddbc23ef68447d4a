"""Fix suggestions from the generation service with model fallback."""

from __future__ import annotations

import logging

from react_lens.analysis.schemas import Diagnostic
from react_lens.config import Settings
from react_lens.constants import AI_PROVIDER, ERROR_TRUNCATION_CHARS
from react_lens.prompts import FIX_SYSTEM_PROMPT, build_fix_prompt
from react_lens.remediation.parsing import parse_structured_fix
from react_lens.remediation.schemas import (
    FixResult,
    FixSuggestion,
    GenerationOptions,
    GenerationRequest,
    GenerationResult,
    RemediationStatus,
)
from react_lens.remediation.transport import (
    GenerationTransport,
    LitellmTransport,
)
from react_lens.resilience.errors import (
    EmptyResponseError,
    MissingCredentialError,
    RemediationError,
    UpstreamError,
    classify_provider_error,
    is_model_unsupported,
)

logger = logging.getLogger(__name__)

FALLBACK_EXPLANATION = (
    "Model response was not valid JSON. Returned as raw fixed code text."
)


def suggestion_from_text(text: str) -> FixSuggestion:
    """Structured suggestion when the text carries one, raw fallback otherwise."""
    parsed = parse_structured_fix(text)
    if parsed is None:
        logger.info(
            "event=fix_parse_fallback response_len=%d", len(text)
        )
        return FixSuggestion(
            explanation=FALLBACK_EXPLANATION, fixed_code=text
        )
    explanation, fixed_code = parsed
    return FixSuggestion(explanation=explanation, fixed_code=fixed_code)


class RemediationClient:
    """Calls model candidates in order until one answers.

    A candidate the provider reports as unknown ("not found", 404) is
    skipped; any other failure ends the call with a classified
    :class:`~react_lens.resilience.errors.RemediationError`.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: GenerationTransport | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._transport = transport or LitellmTransport(
            timeout=self._settings.llm_timeout_seconds
        )

    @property
    def candidates(self) -> list[str]:
        return list(self._settings.litellm_model_chain)

    def status(self) -> RemediationStatus:
        return RemediationStatus(
            configured=bool(self._settings.google_api_key),
            provider=AI_PROVIDER,
            default_model=self._settings.default_model,
        )

    async def generate(
        self,
        prompt: str,
        options: GenerationOptions | None = None,
    ) -> GenerationResult:
        """Run ``prompt`` through the first model candidate that serves it."""
        api_key = self._settings.google_api_key
        if not api_key:
            raise MissingCredentialError("GOOGLE_API_KEY is not configured.")
        opts = options or GenerationOptions()

        last_error: Exception | None = None
        for model in self.candidates:
            request = GenerationRequest(
                model=model,
                prompt=prompt,
                system_instruction=opts.system_prompt,
                temperature=(
                    opts.temperature
                    if opts.temperature is not None
                    else self._settings.fix_temperature
                ),
                max_output_tokens=(
                    opts.max_tokens or self._settings.fix_max_output_tokens
                ),
                api_key=api_key,
            )
            try:
                response = await self._transport.generate(request)
            except RemediationError:
                raise
            except Exception as exc:
                if is_model_unsupported(exc):
                    logger.warning(
                        "event=model_unsupported model=%s error=%s",
                        model,
                        str(exc)[:ERROR_TRUNCATION_CHARS],
                    )
                    last_error = exc
                    continue
                error = classify_provider_error(exc)
                logger.warning(
                    "event=generation_failed model=%s code=%s",
                    model,
                    error.code,
                )
                raise error from exc

            if not response.text:
                raise EmptyResponseError("Gemini returned an empty response.")
            logger.info(
                "event=generation_complete model=%s total_tokens=%d",
                model,
                response.usage.total_tokens,
            )
            return GenerationResult(
                text=response.text, usage=response.usage, model=model
            )

        msg = (
            str(last_error)
            if last_error is not None
            else "No compatible Gemini model found."
        )
        raise UpstreamError(msg) from last_error

    async def fix_diagnostic(
        self,
        diagnostic: Diagnostic,
        code: str,
        options: GenerationOptions | None = None,
    ) -> FixResult:
        """Ask for a fix of ``code`` addressing ``diagnostic``."""
        opts = options or GenerationOptions()
        if opts.system_prompt is None:
            opts = opts.model_copy(
                update={"system_prompt": FIX_SYSTEM_PROMPT}
            )
        result = await self.generate(build_fix_prompt(diagnostic, code), opts)
        return FixResult(
            suggestion=suggestion_from_text(result.text),
            usage=result.usage,
            model=result.model,
        )
