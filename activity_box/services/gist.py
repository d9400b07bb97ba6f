"""Gist storage"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from activity_box.config import GITHUB_API_BASE
from activity_box.services.github import (
    HTTP_TIMEOUT_SECONDS,
    JSONDict,
    api_headers,
    error_detail,
)

logger = logging.getLogger(__name__)


class PublishError(RuntimeError):
    """Raised when the gist cannot be updated."""


class SnippetStore(Protocol):
    async def publish(self, gist_id: str, content: str) -> None:
        """Replace the whole content of the gist."""
        ...


class GistStore:
    """
    Overwrites the single file of a gist.

    The gist's current file name is looked up first so the update lands on
    the existing file; ``filename`` renames it on the way.
    """

    def __init__(
        self,
        token: str,
        *,
        filename: Optional[str] = None,
        base_url: str = GITHUB_API_BASE,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.token = token
        self.filename = filename
        self.base_url = base_url.rstrip("/")
        self._client = client

    async def _send(self, client: httpx.AsyncClient, gist_id: str, content: str) -> JSONDict:
        url = f"{self.base_url}/gists/{gist_id}"
        headers = api_headers(self.token)

        r = await client.get(url, headers=headers)
        if r.status_code >= 300:
            raise PublishError(f"GitHub error: {error_detail(r)}")
        data = r.json()
        files = (data.get("files") if isinstance(data, dict) else None) or {}
        if not files:
            raise PublishError(f"Gist {gist_id} has no files")
        current = next(iter(files))

        body = {"files": {current: {"filename": self.filename or current, "content": content}}}
        r = await client.patch(url, headers=headers, json=body)
        if r.status_code >= 300:
            raise PublishError(f"GitHub error: {error_detail(r)}")
        return r.json()

    async def publish(self, gist_id: str, content: str) -> None:
        logger.debug("Updating Gist %s", gist_id)
        try:
            if self._client is not None:
                await self._send(self._client, gist_id, content)
            else:
                async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
                    await self._send(client, gist_id, content)
        except httpx.HTTPError as exc:
            raise PublishError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise PublishError(f"GitHub returned invalid JSON: {exc}") from exc
