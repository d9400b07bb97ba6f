"""Public activity feed from the GitHub REST API."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import httpx

from activity_box.config import GITHUB_API_BASE
from activity_box.schemas import ActivityEvent
from activity_box.services.serializers import SERIALIZERS

logger = logging.getLogger(__name__)

HTTP_TIMEOUT_SECONDS = 15
EVENTS_PER_PAGE = 100
GITHUB_API_VERSION = "2022-11-28"

JSONDict = dict[str, Any]


class FetchError(RuntimeError):
    """Raised when the activity feed cannot be fetched."""


class ActivitySource(Protocol):
    async def fetch(self, username: str) -> list[ActivityEvent]:
        """Return the user's public events, most recent first."""
        ...


def api_headers(token: Optional[str] = None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def error_detail(resp: httpx.Response) -> str:
    """Best-effort human message from a GitHub error response."""
    try:
        data = resp.json()
    except ValueError:
        data = None
    message = data.get("message") if isinstance(data, dict) else None
    return f"{resp.status_code} {message or resp.text or resp.reason_phrase}".strip()


def _parse_events(items: list[Any]) -> list[ActivityEvent]:
    """
    Validate the feed item by item.

    Items that fail validation are skipped when their type has no serializer,
    since the formatter would drop them anyway. A malformed event of a
    supported type is a :class:`FetchError`.
    """
    events: list[ActivityEvent] = []
    for item in items:
        try:
            events.append(ActivityEvent.model_validate(item))
        except ValueError as exc:
            event_type = item.get("type") if isinstance(item, dict) else None
            if isinstance(event_type, str) and event_type in SERIALIZERS:
                raise FetchError(f"GitHub returned a malformed {event_type}: {exc}") from exc
            logger.debug("Skipping unreadable %s event", event_type or "untyped")
    return events


class GitHubActivitySource:
    """Reads one page of ``/users/{username}/events/public``."""

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        base_url: str = GITHUB_API_BASE,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client = client

    async def _get(self, url: str, params: JSONDict) -> httpx.Response:
        headers = api_headers(self.token)
        if self._client is not None:
            return await self._client.get(url, params=params, headers=headers)
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
            return await client.get(url, params=params, headers=headers)

    async def fetch(self, username: str) -> list[ActivityEvent]:
        logger.debug("Fetching activity for %s", username)
        url = f"{self.base_url}/users/{username}/events/public"
        try:
            resp = await self._get(url, {"per_page": EVENTS_PER_PAGE})
        except httpx.HTTPError as exc:
            raise FetchError(str(exc) or exc.__class__.__name__) from exc

        if resp.status_code >= 300:
            raise FetchError(f"GitHub error: {error_detail(resp)}")
        try:
            data = resp.json()
        except ValueError as exc:
            raise FetchError(f"GitHub returned invalid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise FetchError("GitHub returned an unexpected events payload")

        events = _parse_events(data)
        logger.debug("Found %d events for %s", len(events), username)
        return events
