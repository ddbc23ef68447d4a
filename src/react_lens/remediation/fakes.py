"""In-memory fake transport for testing.

Scripted per-model outcomes, no network — instant calls for unit tests.
"""

from __future__ import annotations

from react_lens.remediation.schemas import (
    GenerationRequest,
    GenerationResponse,
)


class FakeGenerationTransport:
    """GenerationTransport returning or raising a scripted outcome per model.

    Models without a script raise a "not found" error, which the client
    treats as an unsupported candidate.
    """

    def __init__(
        self,
        outcomes: dict[str, GenerationResponse | Exception] | None = None,
    ) -> None:
        self._outcomes = dict(outcomes or {})
        self.requests: list[GenerationRequest] = []

    @property
    def models_called(self) -> list[str]:
        return [r.model for r in self.requests]

    async def generate(
        self, request: GenerationRequest
    ) -> GenerationResponse:
        self.requests.append(request)
        outcome = self._outcomes.get(request.model)
        if outcome is None:
            raise LookupError(f"models/{request.model} is not found")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
