"""Generation transport — one outbound completion call per attempt."""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import TYPE_CHECKING, Any, Protocol

import litellm
from litellm.exceptions import RateLimitError as LitellmRateLimitError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from react_lens.constants import (
    RETRY_INITIAL_WAIT,
    RETRY_MAX_ATTEMPTS,
    RETRY_MAX_WAIT,
)
from react_lens.remediation.schemas import (
    GenerationRequest,
    GenerationResponse,
    GenerationUsage,
)

logger = logging.getLogger(__name__)

# litellm stubs have partially unknown types; typed alias
if TYPE_CHECKING:
    _acompletion: Callable[..., Coroutine[Any, Any, Any]]
else:
    _acompletion = litellm.acompletion


class GenerationTransport(Protocol):
    """Anything that can run one generation request.

    Implementations raise on failure; the client classifies the error
    from its message.
    """

    async def generate(
        self, request: GenerationRequest
    ) -> GenerationResponse: ...


class ContentFilteredError(Exception):
    """The provider withheld output for policy reasons."""


class LitellmTransport:
    """Transport backed by ``litellm.acompletion``."""

    def __init__(self, timeout: int = 60) -> None:
        self._timeout = timeout

    async def generate(
        self, request: GenerationRequest
    ) -> GenerationResponse:
        return await _completion(request, self._timeout)


@retry(
    stop=stop_after_attempt(RETRY_MAX_ATTEMPTS),
    wait=wait_exponential_jitter(
        initial=RETRY_INITIAL_WAIT, max=RETRY_MAX_WAIT
    ),
    retry=retry_if_exception_type(LitellmRateLimitError),
    reraise=True,
)
async def _completion(
    request: GenerationRequest, timeout: int
) -> GenerationResponse:
    """Single completion with rate-limit retry.

    - Tenacity retries rate-limit errors (429) with jittered exponential
      backoff (2s, ~4s) and re-raises the last one when exhausted.
    - All other errors propagate on the first failure.
    """
    messages: list[dict[str, str]] = []
    if request.system_instruction:
        messages.append(
            {"role": "system", "content": request.system_instruction}
        )
    messages.append({"role": "user", "content": request.prompt})

    response: Any = await _acompletion(
        model=request.model,
        messages=messages,
        temperature=request.temperature,
        max_tokens=request.max_output_tokens,
        api_key=request.api_key,
        timeout=timeout,
    )

    choice: Any = response.choices[0]
    text = str(choice.message.content or "")
    if not text and getattr(choice, "finish_reason", None) == "content_filter":
        raise ContentFilteredError(
            f"Response from {request.model} was blocked by safety filters"
        )

    return GenerationResponse(text=text, usage=_usage(response))


def _usage(response: Any) -> GenerationUsage:
    usage: Any = getattr(response, "usage", None)
    return GenerationUsage(
        prompt_tokens=getattr(usage, "prompt_tokens", None) or 0,
        completion_tokens=getattr(usage, "completion_tokens", None) or 0,
        total_tokens=getattr(usage, "total_tokens", None) or 0,
    )
