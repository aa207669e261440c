"""Veil Mail SDK exceptions and API error classification."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class VeilMailError(Exception):
    """Base exception for Veil Mail SDK."""

    prefix = ""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        status_code: int | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}: {self.message}"
        return self.message


class AuthenticationError(VeilMailError):
    """Raised when authentication fails (401)."""

    prefix = "Authentication failed"

    def __init__(self, message: str = "Authentication failed", *, code: str | None = None):
        super().__init__(message, code=code, status_code=401)


class ForbiddenError(VeilMailError):
    """Raised when access is denied (403)."""

    prefix = "Access denied"

    def __init__(self, message: str = "Access denied", *, code: str | None = None):
        super().__init__(message, code=code, status_code=403)


class NotFoundError(VeilMailError):
    """Raised when a resource is not found (404)."""

    prefix = "Resource not found"

    def __init__(self, message: str = "Resource not found", *, code: str | None = None):
        super().__init__(message, code=code, status_code=404)


class ValidationError(VeilMailError):
    """Raised when request validation fails (400, or 422 without PII)."""

    prefix = "Validation error"

    def __init__(
        self,
        message: str = "Invalid request",
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int = 400,
    ):
        super().__init__(message, code=code, status_code=status_code)
        self.details = details


class PiiDetectedError(VeilMailError):
    """Raised when the API refuses content containing PII (422)."""

    prefix = "PII detected"

    def __init__(
        self,
        message: str = "PII detected",
        pii_types: list[str] | None = None,
        *,
        code: str | None = None,
    ):
        super().__init__(message, code=code, status_code=422)
        self.pii_types = list(pii_types or [])


class RateLimitError(VeilMailError):
    """Raised when rate limit is exceeded (429)."""

    prefix = "Rate limit exceeded"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        *,
        code: str | None = None,
    ):
        super().__init__(message, code=code, status_code=429)
        self.retry_after = retry_after


class ServerError(VeilMailError):
    """Raised when the API fails on its side (5xx)."""

    prefix = "Server error"

    def __init__(self, message: str, status_code: int, *, code: str | None = None):
        super().__init__(message, code=code, status_code=status_code)


class TransportError(VeilMailError):
    """Raised when the request never produced an HTTP response.

    Covers connection refused, DNS and TLS failures, timeouts and
    cancellation of the in-flight call.
    """

    prefix = "HTTP error"

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class DeserializationError(VeilMailError):
    """Raised when a successful response body is not valid JSON."""

    prefix = "JSON error"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        cause: BaseException | None = None,
    ):
        super().__init__(message, status_code=status_code)
        self.body = body
        self.cause = cause


class UnclassifiedError(VeilMailError):
    """Raised for failures no other error kind describes."""


def normalize_error_envelope(body: Any) -> Mapping[str, Any]:
    """Return the error payload of a response body.

    The API nests the payload under ``error`` for most endpoints, but some
    return it at the top level.
    """
    if isinstance(body, Mapping):
        nested = body.get("error")
        if isinstance(nested, Mapping):
            return nested
        return body
    return {}


def _pii_types(envelope: Mapping[str, Any]) -> list[str]:
    raw = envelope.get("piiTypes")
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, str)]


def _retry_after(envelope: Mapping[str, Any]) -> int | None:
    raw = envelope.get("retryAfter")
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int) and raw >= 0:
        return raw
    if isinstance(raw, float) and raw.is_integer() and raw >= 0:
        return int(raw)
    return None


def error_from_response(status_code: int, body: Any) -> VeilMailError:
    """Classify a failed API response into a typed error.

    Args:
        status_code: HTTP status code of the response.
        body: Decoded JSON body, or None when it could not be decoded.

    Returns:
        The matching error instance. This function never raises.
    """
    envelope = normalize_error_envelope(body)
    message = envelope.get("message")
    if not isinstance(message, str):
        message = "Unknown error"
    code = envelope.get("code")
    if not isinstance(code, str):
        code = None

    if status_code == 401:
        return AuthenticationError(message, code=code)
    if status_code == 403:
        return ForbiddenError(message, code=code)
    if status_code == 404:
        return NotFoundError(message, code=code)
    if status_code == 400:
        details = envelope.get("details")
        return ValidationError(
            message,
            code=code,
            details=dict(details) if isinstance(details, Mapping) else None,
        )
    if status_code == 422:
        pii_types = _pii_types(envelope)
        # An explicit pii_detected code wins even without enumerated types.
        if code == "pii_detected" or pii_types:
            return PiiDetectedError(message, pii_types=pii_types, code=code)
        return ValidationError(message, code=code, status_code=422)
    if status_code == 429:
        return RateLimitError(message, retry_after=_retry_after(envelope), code=code)
    if status_code >= 500:
        return ServerError(message, status_code=status_code, code=code)
    return UnclassifiedError(message, status_code=status_code)
