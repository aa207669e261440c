"""Webhook signature verification utilities."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping, Sequence

SIGNATURE_HEADER = "X-Signature-Hash"


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def compute_signature(body: str | bytes, secret: str | bytes) -> str:
    """Compute the hex HMAC-SHA256 signature of a webhook body.

    Args:
        body: Raw request body.
        secret: Webhook signing secret.

    Returns:
        Lowercase hex digest, as sent in the X-Signature-Hash header.
    """
    return hmac.new(_to_bytes(secret), _to_bytes(body), hashlib.sha256).hexdigest()


def constant_time_equals(a: Sequence[int], b: Sequence[int]) -> bool:
    """Compare two byte sequences in time independent of their content.

    Only the lengths may short-circuit the comparison. Every byte pair is
    visited, whatever the position of the first difference.
    """
    if len(a) != len(b):
        return False

    diff = 0
    for x, y in zip(a, b):
        diff |= x ^ y
    return diff == 0


def verify_signature(body: str | bytes, signature: str, secret: str | bytes) -> bool:
    """Verify a webhook signature.

    Args:
        body: Exact raw request body as received.
        signature: Value of the X-Signature-Hash header.
        secret: Webhook signing secret.

    Returns:
        True if signature is valid, False otherwise.
    """
    try:
        expected = compute_signature(body, secret).encode("ascii")
        presented = _to_bytes(signature)
    except (AttributeError, TypeError, ValueError):
        return False

    return constant_time_equals(expected, presented)


class WebhookVerifier:
    """Verify Veil Mail webhook requests.

    Example:
        ```python
        from veilmail import WebhookVerifier

        verifier = WebhookVerifier(secret="whsec_...")

        @app.post("/webhooks/veilmail")
        def handle_webhook(request):
            try:
                signature = verifier.extract_signature(request.headers)
            except ValueError as e:
                return {"error": str(e)}, 400

            if not verifier.verify(request.get_data(), signature):
                return {"error": "Invalid signature"}, 401

            return {"status": "ok"}
        ```
    """

    def __init__(self, secret: str | bytes):
        """Initialize webhook verifier.

        Args:
            secret: Webhook signing secret from Veil Mail.
        """
        self.secret = secret

    def verify(self, body: str | bytes, signature: str) -> bool:
        """Verify the signature of a raw request body."""
        return verify_signature(body, signature, self.secret)

    @staticmethod
    def extract_signature(headers: Mapping[str, str]) -> str:
        """Extract the signature header from a request.

        Args:
            headers: Request headers mapping.

        Returns:
            The signature value.

        Raises:
            ValueError: If the signature header is missing.
        """
        normalized = {k.lower(): v for k, v in headers.items()}

        signature = normalized.get(SIGNATURE_HEADER.lower())
        if not signature:
            raise ValueError(f"Missing {SIGNATURE_HEADER} header")

        return signature
