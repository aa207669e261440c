"""Veil Mail Python SDK - Email sending and marketing automation."""

from .client import VeilMail
from .webhook import WebhookVerifier, compute_signature, verify_signature
from .exceptions import (
    VeilMailError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
    PiiDetectedError,
    RateLimitError,
    ServerError,
    TransportError,
    DeserializationError,
    UnclassifiedError,
    error_from_response,
)

__version__ = "0.1.0"
__all__ = [
    "VeilMail",
    "WebhookVerifier",
    "compute_signature",
    "verify_signature",
    "VeilMailError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "PiiDetectedError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "DeserializationError",
    "UnclassifiedError",
    "error_from_response",
]
