"""Veil Mail API client."""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from .exceptions import (
    DeserializationError,
    TransportError,
    UnclassifiedError,
    error_from_response,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.veilmail.xyz"
DEFAULT_TIMEOUT = 30.0
API_KEY_PREFIXES = ("veil_live_", "veil_test_")


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop query parameters that have no value."""
    if not params:
        return None
    cleaned = {k: v for k, v in params.items() if v is not None and v != ""}
    return cleaned or None


def _unwrap_data(payload: Any) -> Any:
    """Return the ``data`` object of a wrapped response, or the payload itself."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload


class VeilMail:
    """Client for interacting with the Veil Mail API.

    Example:
        ```python
        from veilmail import VeilMail

        client = VeilMail(api_key="veil_live_xxxxx")

        # Send an email
        email = client.emails.send({
            "from": "hello@yourdomain.com",
            "to": ["user@example.com"],
            "subject": "Hello from Python!",
            "html": "<h1>Welcome!</h1>",
        })

        # Add a subscriber to an audience
        client.audiences.subscribers("aud_123").add({"email": "user@example.com"})
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the Veil Mail client.

        Args:
            api_key: Your Veil Mail API key. Falls back to the
                VEILMAIL_API_KEY environment variable.
            base_url: Base URL for the Veil Mail API.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, mainly for testing.

        Raises:
            UnclassifiedError: If the API key does not start with
                ``veil_live_`` or ``veil_test_``.
        """
        if api_key is None:
            api_key = os.environ.get("VEILMAIL_API_KEY", "")
        if not isinstance(api_key, str) or not api_key.startswith(API_KEY_PREFIXES):
            raise UnclassifiedError("API key must start with 'veil_live_' or 'veil_test_'")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
                "User-Agent": "veilmail-python/0.1.0",
            },
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

        # Resource endpoints
        self.emails = EmailsResource(self)
        self.domains = DomainsResource(self)
        self.templates = TemplatesResource(self)
        self.audiences = AudiencesResource(self)
        self.campaigns = CampaignsResource(self)
        self.webhooks = WebhooksResource(self)
        self.topics = TopicsResource(self)
        self.properties = PropertiesResource(self)
        self.sequences = SequencesResource(self)
        self.feeds = FeedsResource(self)
        self.forms = FormsResource(self)
        self.analytics = AnalyticsResource(self)

    def _send(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue one request, mapping encoding and network failures to TransportError."""
        logger.debug("Veil Mail request %s %s", method, path)
        try:
            request = self._client.build_request(
                method=method,
                url=path,
                json=json,
                params=_clean_params(params),
            )
        except (TypeError, ValueError) as exc:
            raise TransportError(
                f"Could not encode request for {method} {path}: {exc}", cause=exc
            ) from exc
        try:
            response = self._client.send(request)
        except httpx.RequestError as exc:
            logger.warning("Veil Mail request %s %s failed: %s", method, path, exc)
            raise TransportError(
                f"Request failed for {method} {path}: {exc}", cause=exc
            ) from exc
        logger.debug("Veil Mail response %s %s -> %s", method, path, response.status_code)
        return response

    def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an API request and return the decoded JSON body."""
        return self._handle_response(self._send(method, path, json=json, params=params))

    def _request_raw(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> str:
        """Make an API request and return the body as text."""
        response = self._send(method, path, params=params)
        self._raise_for_status(response)
        return response.text

    def _request_no_content(self, method: str, path: str) -> None:
        """Make an API request whose successful body is ignored."""
        self._raise_for_status(self._send(method, path))

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise the classified API error for a failed response."""
        if response.status_code < 400:
            return
        try:
            body = response.json()
        except ValueError:
            body = None
        error = error_from_response(response.status_code, body)
        logger.debug(
            "Veil Mail API error %s (%s): %s",
            response.status_code,
            type(error).__name__,
            error.message,
        )
        raise error

    def _handle_response(self, response: httpx.Response) -> Any:
        """Handle API response and raise appropriate exceptions."""
        if response.status_code == 204:
            return {}

        self._raise_for_status(response)

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Invalid JSON response for {response.request.method} {response.request.url}",
                status_code=response.status_code,
                body=response.text,
                cause=exc,
            ) from exc

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> VeilMail:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class EmailsResource:
    """Email sending and management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def send(self, data: dict[str, Any]) -> dict[str, Any]:
        """Send a single email.

        Args:
            data: Email parameters (from, to, subject, html/text, tags, ...).

        Returns:
            Created email.
        """
        return self._client._request("POST", "/v1/emails", json=data)

    def send_batch(self, emails: list[dict[str, Any]]) -> dict[str, Any]:
        """Send a batch of up to 100 emails.

        Args:
            emails: List of email parameter dicts.

        Returns:
            Batch result.
        """
        return self._client._request("POST", "/v1/emails/batch", json={"emails": emails})

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """List emails with optional filters."""
        return self._client._request("GET", "/v1/emails", params=params)

    def get(self, email_id: str) -> dict[str, Any]:
        """Get a single email by ID."""
        return self._client._request("GET", f"/v1/emails/{email_id}")

    def cancel(self, email_id: str) -> dict[str, Any]:
        """Cancel a scheduled email."""
        return self._client._request("POST", f"/v1/emails/{email_id}/cancel")

    def update(self, email_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Reschedule a scheduled email.

        Args:
            email_id: Email ID.
            data: Fields to update (e.g. scheduledFor).

        Returns:
            Updated email.
        """
        return self._client._request("PATCH", f"/v1/emails/{email_id}", json=data)

    def links(self, email_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Get tracked link analytics for a specific email."""
        return self._client._request("GET", f"/v1/emails/{email_id}/links", params=params)


class DomainsResource:
    """Domain management for email sending."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", "/v1/domains", json=data))

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/domains", params=params)

    def get(self, domain_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("GET", f"/v1/domains/{domain_id}"))

    def update(self, domain_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("PATCH", f"/v1/domains/{domain_id}", json=data)

    def verify(self, domain_id: str) -> dict[str, Any]:
        """Trigger DNS verification for a domain.

        Args:
            domain_id: Domain ID.

        Returns:
            Domain with updated verification status.
        """
        return _unwrap_data(self._client._request("POST", f"/v1/domains/{domain_id}/verify"))

    def delete(self, domain_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/domains/{domain_id}")


class TemplatesResource:
    """Email template management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", "/v1/templates", json=data))

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/templates", params=params)

    def get(self, template_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("GET", f"/v1/templates/{template_id}"))

    def update(self, template_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(
            self._client._request("PATCH", f"/v1/templates/{template_id}", json=data)
        )

    def preview(self, data: dict[str, Any]) -> dict[str, Any]:
        """Render a template with sample variables without saving it."""
        return self._client._request("POST", "/v1/templates/preview", json=data)

    def delete(self, template_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/templates/{template_id}")


class AudiencesResource:
    """Audience management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", "/v1/audiences", json=data))

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/audiences", params=params)

    def get(self, audience_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("GET", f"/v1/audiences/{audience_id}"))

    def update(self, audience_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(
            self._client._request("PUT", f"/v1/audiences/{audience_id}", json=data)
        )

    def delete(self, audience_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/audiences/{audience_id}")

    def subscribers(self, audience_id: str) -> SubscribersResource:
        """Get a subscribers resource scoped to the given audience.

        Args:
            audience_id: Audience ID.

        Returns:
            Subscriber operations for that audience.
        """
        return SubscribersResource(self._client, audience_id)

    def recalculate_engagement(self, audience_id: str) -> dict[str, Any]:
        """Recalculate engagement scores for all subscribers."""
        return self._client._request(
            "POST", f"/v1/audiences/{audience_id}/recalculate-engagement", json={}
        )

    def get_engagement_stats(self, audience_id: str) -> dict[str, Any]:
        """Get engagement statistics for an audience."""
        return self._client._request("GET", f"/v1/audiences/{audience_id}/engagement-stats")


class SubscribersResource:
    """Subscriber management within an audience."""

    def __init__(self, client: VeilMail, audience_id: str):
        self._client = client
        self._base_path = f"/v1/audiences/{audience_id}/subscribers"

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", self._base_path, params=params)

    def add(self, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", self._base_path, json=data))

    def get(self, subscriber_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("GET", f"{self._base_path}/{subscriber_id}"))

    def update(self, subscriber_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(
            self._client._request("PUT", f"{self._base_path}/{subscriber_id}", json=data)
        )

    def remove(self, subscriber_id: str) -> None:
        self._client._request_no_content("DELETE", f"{self._base_path}/{subscriber_id}")

    def confirm(self, subscriber_id: str) -> dict[str, Any]:
        """Confirm a pending double opt-in subscriber."""
        return _unwrap_data(
            self._client._request("POST", f"{self._base_path}/{subscriber_id}/confirm")
        )

    def import_subscribers(self, data: dict[str, Any]) -> dict[str, Any]:
        """Bulk import subscribers.

        Args:
            data: Import parameters (subscribers list or CSV data).

        Returns:
            Import job result.
        """
        return self._client._request("POST", f"{self._base_path}/import", json=data)

    def export(self, params: dict[str, Any] | None = None) -> str:
        """Export subscribers as CSV.

        Returns:
            CSV text.
        """
        return self._client._request_raw("GET", f"{self._base_path}/export", params=params)

    def activity(
        self,
        subscriber_id: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Get the activity timeline of a subscriber."""
        return self._client._request(
            "GET", f"{self._base_path}/{subscriber_id}/activity", params=params
        )


class CampaignsResource:
    """Campaign management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", "/v1/campaigns", json=data))

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/campaigns", params=params)

    def get(self, campaign_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("GET", f"/v1/campaigns/{campaign_id}"))

    def update(self, campaign_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(
            self._client._request("PATCH", f"/v1/campaigns/{campaign_id}", json=data)
        )

    def delete(self, campaign_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/campaigns/{campaign_id}")

    def schedule(self, campaign_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Schedule a campaign.

        Args:
            campaign_id: Campaign ID.
            data: Schedule parameters (e.g. scheduledAt).

        Returns:
            Scheduled campaign.
        """
        return _unwrap_data(
            self._client._request("POST", f"/v1/campaigns/{campaign_id}/schedule", json=data)
        )

    def send(self, campaign_id: str) -> dict[str, Any]:
        """Send a campaign immediately."""
        return _unwrap_data(self._client._request("POST", f"/v1/campaigns/{campaign_id}/send"))

    def pause(self, campaign_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", f"/v1/campaigns/{campaign_id}/pause"))

    def resume(self, campaign_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", f"/v1/campaigns/{campaign_id}/resume"))

    def cancel(self, campaign_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", f"/v1/campaigns/{campaign_id}/cancel"))

    def send_test(self, campaign_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Send a test copy of a campaign to a list of addresses."""
        return self._client._request("POST", f"/v1/campaigns/{campaign_id}/test", json=data)

    def clone(self, campaign_id: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        """Clone a campaign.

        Args:
            campaign_id: Campaign ID.
            data: Optional overrides for the clone.

        Returns:
            The new campaign.
        """
        return self._client._request(
            "POST", f"/v1/campaigns/{campaign_id}/clone", json=data or {}
        )

    def links(self, campaign_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Get tracked link analytics for a campaign."""
        return self._client._request("GET", f"/v1/campaigns/{campaign_id}/links", params=params)


class WebhooksResource:
    """Webhook endpoint management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a webhook endpoint.

        Args:
            data: Webhook parameters (url, events, ...).

        Returns:
            Created webhook with signing secret (only shown once).
        """
        return _unwrap_data(self._client._request("POST", "/v1/webhooks", json=data))

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/webhooks", params=params)

    def get(self, webhook_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("GET", f"/v1/webhooks/{webhook_id}"))

    def update(self, webhook_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(
            self._client._request("PATCH", f"/v1/webhooks/{webhook_id}", json=data)
        )

    def delete(self, webhook_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/webhooks/{webhook_id}")

    def test(self, webhook_id: str) -> dict[str, Any]:
        """Send a test event to a webhook endpoint."""
        return self._client._request("POST", f"/v1/webhooks/{webhook_id}/test")

    def rotate_secret(self, webhook_id: str) -> dict[str, Any]:
        """Rotate webhook secret.

        Returns:
            Webhook with new secret (only shown once).
        """
        return _unwrap_data(
            self._client._request("POST", f"/v1/webhooks/{webhook_id}/rotate-secret")
        )


class TopicsResource:
    """Subscription topic management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("POST", "/v1/topics", json=data)

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/topics", params=params)

    def get(self, topic_id: str) -> dict[str, Any]:
        return self._client._request("GET", f"/v1/topics/{topic_id}")

    def update(self, topic_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("PATCH", f"/v1/topics/{topic_id}", json=data)

    def delete(self, topic_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/topics/{topic_id}")

    def get_preferences(self, audience_id: str, subscriber_id: str) -> dict[str, Any]:
        """Get the topic preferences of a subscriber."""
        return self._client._request(
            "GET", f"/v1/audiences/{audience_id}/subscribers/{subscriber_id}/topics"
        )

    def set_preferences(
        self,
        audience_id: str,
        subscriber_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """Replace the topic preferences of a subscriber."""
        return self._client._request(
            "PUT",
            f"/v1/audiences/{audience_id}/subscribers/{subscriber_id}/topics",
            json=data,
        )


class PropertiesResource:
    """Contact property management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(self._client._request("POST", "/v1/properties", json=data))

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/properties", params=params)

    def get(self, property_id: str) -> dict[str, Any]:
        return _unwrap_data(self._client._request("GET", f"/v1/properties/{property_id}"))

    def update(self, property_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_data(
            self._client._request("PATCH", f"/v1/properties/{property_id}", json=data)
        )

    def delete(self, property_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/properties/{property_id}")

    def get_values(self, audience_id: str, subscriber_id: str) -> dict[str, Any]:
        """Get the property values of a subscriber."""
        return self._client._request(
            "GET", f"/v1/audiences/{audience_id}/subscribers/{subscriber_id}/properties"
        )

    def set_values(
        self,
        audience_id: str,
        subscriber_id: str,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        """Set property values on a subscriber."""
        return self._client._request(
            "PUT",
            f"/v1/audiences/{audience_id}/subscribers/{subscriber_id}/properties",
            json=values,
        )


class SequencesResource:
    """Automation sequence management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("POST", "/v1/sequences", json=data)

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/sequences", params=params)

    def get(self, sequence_id: str) -> dict[str, Any]:
        return self._client._request("GET", f"/v1/sequences/{sequence_id}")

    def update(self, sequence_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("PUT", f"/v1/sequences/{sequence_id}", json=data)

    def delete(self, sequence_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/sequences/{sequence_id}")

    def activate(self, sequence_id: str) -> dict[str, Any]:
        return self._client._request("POST", f"/v1/sequences/{sequence_id}/activate")

    def pause(self, sequence_id: str) -> dict[str, Any]:
        return self._client._request("POST", f"/v1/sequences/{sequence_id}/pause")

    def archive(self, sequence_id: str) -> dict[str, Any]:
        return self._client._request("POST", f"/v1/sequences/{sequence_id}/archive")

    def add_step(self, sequence_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Append a step to a sequence.

        Args:
            sequence_id: Sequence ID.
            data: Step parameters (type, delay, template, ...).

        Returns:
            Created step.
        """
        return self._client._request("POST", f"/v1/sequences/{sequence_id}/steps", json=data)

    def update_step(
        self,
        sequence_id: str,
        step_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        return self._client._request(
            "PUT", f"/v1/sequences/{sequence_id}/steps/{step_id}", json=data
        )

    def delete_step(self, sequence_id: str, step_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/sequences/{sequence_id}/steps/{step_id}")

    def reorder_steps(self, sequence_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Reorder the steps of a sequence."""
        return self._client._request(
            "POST", f"/v1/sequences/{sequence_id}/steps/reorder", json=data
        )

    def enroll(self, sequence_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Enroll subscribers into a sequence."""
        return self._client._request("POST", f"/v1/sequences/{sequence_id}/enroll", json=data)

    def list_enrollments(
        self,
        sequence_id: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self._client._request(
            "GET", f"/v1/sequences/{sequence_id}/enrollments", params=params
        )

    def remove_enrollment(self, sequence_id: str, enrollment_id: str) -> None:
        self._client._request_no_content(
            "DELETE", f"/v1/sequences/{sequence_id}/enrollments/{enrollment_id}"
        )


class FeedsResource:
    """RSS feed management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("POST", "/v1/feeds", json=data)

    def list(self) -> dict[str, Any]:
        return self._client._request("GET", "/v1/feeds")

    def get(self, feed_id: str) -> dict[str, Any]:
        return self._client._request("GET", f"/v1/feeds/{feed_id}")

    def update(self, feed_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("PUT", f"/v1/feeds/{feed_id}", json=data)

    def delete(self, feed_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/feeds/{feed_id}")

    def poll(self, feed_id: str) -> dict[str, Any]:
        """Poll a feed for new items now."""
        return self._client._request("POST", f"/v1/feeds/{feed_id}/poll")

    def pause(self, feed_id: str) -> dict[str, Any]:
        return self._client._request("POST", f"/v1/feeds/{feed_id}/pause")

    def resume(self, feed_id: str) -> dict[str, Any]:
        return self._client._request("POST", f"/v1/feeds/{feed_id}/resume")

    def list_items(self, feed_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", f"/v1/feeds/{feed_id}/items", params=params)


class FormsResource:
    """Signup form management."""

    def __init__(self, client: VeilMail):
        self._client = client

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("POST", "/v1/forms", json=data)

    def list(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client._request("GET", "/v1/forms", params=params)

    def get(self, form_id: str) -> dict[str, Any]:
        return self._client._request("GET", f"/v1/forms/{form_id}")

    def update(self, form_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._client._request("PUT", f"/v1/forms/{form_id}", json=data)

    def delete(self, form_id: str) -> None:
        self._client._request_no_content("DELETE", f"/v1/forms/{form_id}")


class AnalyticsResource:
    """Geo and device analytics."""

    def __init__(self, client: VeilMail):
        self._client = client

    def geo(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Get organization-level geo analytics."""
        return self._client._request("GET", "/v1/analytics/geo", params=params)

    def devices(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Get organization-level device analytics."""
        return self._client._request("GET", "/v1/analytics/devices", params=params)

    def campaign_geo(
        self,
        campaign_id: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Get campaign-level geo analytics."""
        return self._client._request(
            "GET", f"/v1/campaigns/{campaign_id}/analytics/geo", params=params
        )

    def campaign_devices(
        self,
        campaign_id: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Get campaign-level device analytics."""
        return self._client._request(
            "GET", f"/v1/campaigns/{campaign_id}/analytics/devices", params=params
        )
