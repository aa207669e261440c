"""Tests for the Veil Mail client and its transport handling."""

import json
from datetime import datetime

import httpx
import pytest

from veilmail import (
    DeserializationError,
    NotFoundError,
    PiiDetectedError,
    RateLimitError,
    ServerError,
    TransportError,
    UnclassifiedError,
    VeilMail,
)

API_KEY = "veil_test_abc123"


def make_client(handler) -> VeilMail:
    return VeilMail(
        api_key=API_KEY,
        base_url="https://api.example.test/",
        transport=httpx.MockTransport(handler),
    )


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, **kwargs):
        self.status_code = status_code
        self.kwargs = kwargs
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, request=request, **self.kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class TestClientConstruction:
    def test_rejects_unknown_key_prefix(self):
        with pytest.raises(UnclassifiedError, match="veil_live_"):
            VeilMail(api_key="sk_live_123")

    def test_reads_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("VEILMAIL_API_KEY", "veil_live_fromenv")

        with VeilMail() as client:
            assert client.api_key == "veil_live_fromenv"

    def test_rejects_non_string_key(self):
        with pytest.raises(UnclassifiedError):
            VeilMail(api_key=123)

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("VEILMAIL_API_KEY", raising=False)

        with pytest.raises(UnclassifiedError):
            VeilMail()

    def test_defaults(self):
        with VeilMail(api_key="veil_live_x") as client:
            assert client.base_url == "https://api.veilmail.xyz"
            assert client.timeout == 30.0


class TestRequestHandling:
    def test_sends_auth_and_client_headers(self):
        recorder = Recorder(json={"id": "em_1"})
        with make_client(recorder) as client:
            client.emails.get("em_1")

        request = recorder.last
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"
        assert request.headers["User-Agent"].startswith("veilmail-python/")
        assert str(request.url) == "https://api.example.test/v1/emails/em_1"

    def test_serializes_json_body(self):
        recorder = Recorder(json={"id": "em_1"})
        with make_client(recorder) as client:
            result = client.emails.send({"to": ["a@example.com"], "subject": "Hi"})

        assert result == {"id": "em_1"}
        assert recorder.last.method == "POST"
        assert json.loads(recorder.last.content) == {
            "to": ["a@example.com"],
            "subject": "Hi",
        }

    def test_drops_empty_query_values(self):
        recorder = Recorder(json={"data": []})
        with make_client(recorder) as client:
            client.emails.list({"status": "", "limit": 10, "cursor": None})

        params = recorder.last.url.params
        assert "status" not in params
        assert "cursor" not in params
        assert params["limit"] == "10"

    def test_no_content_returns_empty_dict(self):
        recorder = Recorder(status_code=204)
        with make_client(recorder) as client:
            assert client.sequences.activate("seq_1") == {}

    def test_delete_returns_none(self):
        recorder = Recorder(status_code=204)
        with make_client(recorder) as client:
            assert client.domains.delete("dom_1") is None

        assert recorder.last.method == "DELETE"

    def test_delete_ignores_non_json_success_body(self):
        recorder = Recorder(status_code=200, text="OK")
        with make_client(recorder) as client:
            assert client.domains.delete("dom_1") is None
            assert client.sequences.remove_enrollment("seq_1", "enr_1") is None

    def test_unserializable_body_is_transport_failure(self):
        recorder = Recorder(json={"id": "em_1"})
        with make_client(recorder) as client:
            with pytest.raises(TransportError) as exc_info:
                client.emails.send({"scheduledFor": datetime(2024, 1, 1)})

        assert isinstance(exc_info.value.cause, TypeError)
        assert recorder.requests == []

    def test_follows_redirects(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/v1/emails":
                return httpx.Response(
                    307, headers={"Location": "/v2/emails"}, request=request
                )
            return httpx.Response(200, json={"id": "em_1"}, request=request)

        with make_client(handler) as client:
            assert client.emails.send({"subject": "Hi"}) == {"id": "em_1"}

    def test_unwraps_data(self):
        recorder = Recorder(json={"data": {"id": "dom_1", "status": "verified"}})
        with make_client(recorder) as client:
            assert client.domains.verify("dom_1") == {"id": "dom_1", "status": "verified"}

    def test_keeps_list_data(self):
        body = {"data": [{"id": "dom_1"}], "hasMore": False}
        recorder = Recorder(json=body)
        with make_client(recorder) as client:
            assert client.domains.list() == body

    def test_classifies_api_errors(self):
        body = {
            "error": {
                "message": "Too many requests",
                "code": "rate_limited",
                "retryAfter": 60,
            }
        }
        recorder = Recorder(status_code=429, json=body)
        with make_client(recorder) as client:
            with pytest.raises(RateLimitError) as exc_info:
                client.emails.list()

        assert exc_info.value.message == "Too many requests"
        assert exc_info.value.code == "rate_limited"
        assert exc_info.value.retry_after == 60

    def test_pii_detected(self):
        body = {"error": {"message": "PII found", "code": "pii_detected", "piiTypes": ["ssn"]}}
        recorder = Recorder(status_code=422, json=body)
        with make_client(recorder) as client:
            with pytest.raises(PiiDetectedError) as exc_info:
                client.emails.send({"text": "123-45-6789"})

        assert exc_info.value.pii_types == ["ssn"]

    def test_error_with_non_json_body(self):
        recorder = Recorder(status_code=502, text="<html>Bad gateway</html>")
        with make_client(recorder) as client:
            with pytest.raises(ServerError) as exc_info:
                client.campaigns.get("cmp_1")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Unknown error"

    def test_delete_classifies_errors(self):
        recorder = Recorder(status_code=404, json={"error": {"message": "No such form"}})
        with make_client(recorder) as client:
            with pytest.raises(NotFoundError, match="No such form"):
                client.forms.delete("frm_1")

    def test_invalid_json_on_success(self):
        recorder = Recorder(status_code=200, text="not-json")
        with make_client(recorder) as client:
            with pytest.raises(DeserializationError) as exc_info:
                client.topics.list()

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == "not-json"

    def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler) as client:
            with pytest.raises(TransportError) as exc_info:
                client.emails.get("em_1")

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.status_code is None

    def test_timeout_is_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with make_client(handler) as client:
            with pytest.raises(TransportError):
                client.emails.get("em_1")


class TestResources:
    def test_subscribers_scoped_paths(self):
        recorder = Recorder(json={"data": {"id": "sub_1"}})
        with make_client(recorder) as client:
            subscribers = client.audiences.subscribers("aud_1")
            assert subscribers.get("sub_1") == {"id": "sub_1"}
            subscribers.update("sub_1", {"firstName": "Ada"})

        assert recorder.requests[0].url.path == "/v1/audiences/aud_1/subscribers/sub_1"
        assert recorder.last.method == "PUT"

    def test_subscribers_export_returns_text(self):
        recorder = Recorder(text="email\nuser@example.com\n")
        with make_client(recorder) as client:
            csv = client.audiences.subscribers("aud_1").export({"status": "active"})

        assert csv == "email\nuser@example.com\n"
        assert recorder.last.url.path == "/v1/audiences/aud_1/subscribers/export"

    def test_send_batch_wraps_emails(self):
        recorder = Recorder(json={"data": []})
        with make_client(recorder) as client:
            client.emails.send_batch([{"to": ["a@example.com"]}])

        assert json.loads(recorder.last.content) == {"emails": [{"to": ["a@example.com"]}]}

    def test_campaign_clone_defaults_to_empty_body(self):
        recorder = Recorder(json={"id": "cmp_2"})
        with make_client(recorder) as client:
            client.campaigns.clone("cmp_1")

        assert recorder.last.url.path == "/v1/campaigns/cmp_1/clone"
        assert json.loads(recorder.last.content) == {}

    def test_sequence_step_paths(self):
        recorder = Recorder(status_code=204)
        with make_client(recorder) as client:
            client.sequences.delete_step("seq_1", "step_2")
            client.sequences.remove_enrollment("seq_1", "enr_3")

        assert recorder.requests[0].url.path == "/v1/sequences/seq_1/steps/step_2"
        assert recorder.requests[1].url.path == "/v1/sequences/seq_1/enrollments/enr_3"

    def test_topic_preferences(self):
        recorder = Recorder(json={"topics": []})
        with make_client(recorder) as client:
            client.topics.set_preferences("aud_1", "sub_1", {"topics": []})

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/v1/audiences/aud_1/subscribers/sub_1/topics"

    def test_campaign_analytics(self):
        recorder = Recorder(json={"countries": []})
        with make_client(recorder) as client:
            client.analytics.campaign_geo("cmp_1", {"from": "2024-01-01", "to": ""})

        assert recorder.last.url.path == "/v1/campaigns/cmp_1/analytics/geo"
        assert dict(recorder.last.url.params) == {"from": "2024-01-01"}
