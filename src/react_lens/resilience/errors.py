"""Remediation error taxonomy and provider-error classification.

Every failure surfaced by the remediation client is one of the
:class:`RemediationError` subclasses below, each with a fixed HTTP
status class and machine-readable code.

Classification sniffs the provider's human-readable message
(case-insensitive substring match). The substrings are kept exactly;
changing them changes which errors callers see.
"""

from __future__ import annotations

from react_lens.constants import MODEL_UNSUPPORTED_MARKERS, ErrorCode


class RemediationError(Exception):
    """Base class for caller-visible remediation failures."""

    status_code: int = 502
    code: ErrorCode = ErrorCode.UPSTREAM_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingCredentialError(RemediationError):
    status_code = 500
    code = ErrorCode.MISSING_API_KEY


class InvalidCredentialError(RemediationError):
    status_code = 401
    code = ErrorCode.INVALID_API_KEY


class QuotaExceededError(RemediationError):
    status_code = 429
    code = ErrorCode.QUOTA_EXCEEDED


class SafetyBlockedError(RemediationError):
    status_code = 400
    code = ErrorCode.SAFETY_BLOCKED


class EmptyResponseError(RemediationError):
    status_code = 502
    code = ErrorCode.EMPTY_RESPONSE


class UpstreamError(RemediationError):
    status_code = 502
    code = ErrorCode.UPSTREAM_ERROR


_CREDENTIAL_MARKERS = ("api key", "permission denied", "unauthorized")
_QUOTA_MARKERS = ("quota", "resource_exhausted", "rate limit")
_SAFETY_MARKERS = ("safety",)


def is_model_unsupported(error: BaseException) -> bool:
    """True when the upstream does not serve the requested model."""
    msg = str(error).lower()
    return any(marker in msg for marker in MODEL_UNSUPPORTED_MARKERS)


def classify_provider_error(error: BaseException) -> RemediationError:
    """Map a non-fallback provider failure onto the taxonomy.

    Errors already in the taxonomy pass through unchanged.
    """
    if isinstance(error, RemediationError):
        return error

    message = str(error) or "Unknown generation service error"
    msg = message.lower()

    if any(marker in msg for marker in _CREDENTIAL_MARKERS):
        return InvalidCredentialError(
            "GOOGLE_API_KEY is invalid or unauthorized."
        )
    if any(marker in msg for marker in _QUOTA_MARKERS):
        return QuotaExceededError(
            "Gemini quota exceeded. Try again later or check usage limits."
        )
    if any(marker in msg for marker in _SAFETY_MARKERS):
        return SafetyBlockedError(
            "Gemini blocked this request due to safety policies."
        )
    return UpstreamError(message)
