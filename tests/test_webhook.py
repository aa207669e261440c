"""Tests for webhook verification."""

import hmac
import hashlib

import pytest

from veilmail import WebhookVerifier, compute_signature, verify_signature
from veilmail.webhook import constant_time_equals


def create_signature(secret: str, body: str) -> str:
    """Create a valid webhook signature."""
    return hmac.new(secret.encode(), body.encode(), hashlib.sha256).hexdigest()


class CountingBytes:
    """Byte sequence that counts how many bytes were read."""

    def __init__(self, data: bytes):
        self.data = data
        self.visited = 0

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        for byte in self.data:
            self.visited += 1
            yield byte


BODY = '{"type":"email.delivered","data":{"emailId":"em_123"}}'
SECRET = "whsec_test"


class TestVerifySignature:
    def test_compute_signature_matches_hmac_sha256(self):
        assert compute_signature(BODY, SECRET) == create_signature(SECRET, BODY)

    def test_verify_valid_signature(self):
        signature = create_signature(SECRET, BODY)

        assert verify_signature(BODY, signature, SECRET) is True

    def test_verify_accepts_bytes_body(self):
        signature = compute_signature(BODY.encode(), SECRET)

        assert verify_signature(BODY.encode(), signature, SECRET) is True

    def test_verify_wrong_secret(self):
        signature = compute_signature(BODY, SECRET)

        assert verify_signature(BODY, signature, "whsec_other") is False

    def test_verify_invalid_signature(self):
        assert verify_signature(BODY, "wrong", SECRET) is False

    def test_verify_tampered_body(self):
        signature = compute_signature(BODY, SECRET)

        assert verify_signature(BODY + " ", signature, SECRET) is False

    def test_verify_empty_secret_does_not_raise(self):
        signature = compute_signature(BODY, "")

        assert verify_signature(BODY, signature, "") is True

    def test_verify_unencodable_signature_is_invalid(self):
        assert verify_signature(BODY, "\ud800" * 64, SECRET) is False


class TestConstantTimeEquals:
    def test_equal(self):
        assert constant_time_equals(b"abcdef", b"abcdef") is True

    def test_different_lengths(self):
        assert constant_time_equals(b"abc", b"abcd") is False

    def test_empty(self):
        assert constant_time_equals(b"", b"") is True

    @pytest.mark.parametrize(
        "other",
        [b"0123456789", b"x123456789", b"01234x6789", b"012345678x"],
    )
    def test_visits_every_byte(self, other):
        a = CountingBytes(b"0123456789")
        b = CountingBytes(other)

        constant_time_equals(a, b)

        assert a.visited == 10
        assert b.visited == 10

    def test_last_byte_mismatch(self):
        assert constant_time_equals(b"0123456789", b"012345678x") is False


class TestWebhookVerifier:
    def test_verify(self):
        verifier = WebhookVerifier(secret=SECRET)
        signature = create_signature(SECRET, BODY)

        assert verifier.verify(BODY, signature) is True
        assert verifier.verify(BODY, "invalid") is False

    def test_extract_signature(self):
        headers = {
            "Content-Type": "application/json",
            "x-signature-hash": "abc123",
        }

        assert WebhookVerifier.extract_signature(headers) == "abc123"

    def test_extract_signature_missing(self):
        headers = {"Content-Type": "application/json"}

        with pytest.raises(ValueError, match="Missing X-Signature-Hash"):
            WebhookVerifier.extract_signature(headers)
