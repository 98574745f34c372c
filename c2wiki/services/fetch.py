#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page source client
==================
Fetches raw WardWiki page text from the upstream JSON proxy.

    GET {remote_base_url}/{slug}  →  {"text": "...", "date": "...", "names": [...]}
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from typing import Optional

import httpx
from pydantic import ValidationError

from c2wiki.core.config import get_settings
from c2wiki.core.errors import PageNotFound, UpstreamError
from c2wiki.schemas import RemotePage

log = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"[A-Za-z0-9]+")


# -----------------------------------------------------------------------------

def is_valid_slug(slug: str) -> bool:
    return _SLUG_RE.fullmatch(slug) is not None


# -----------------------------------------------------------------------------

class PageFetcher:

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.base_url  = (base_url or settings.remote_base_url).rstrip("/")
        self.timeout   = timeout if timeout is not None else settings.fetch_timeout
        self.transport = transport

    async def fetch(self, slug: str) -> RemotePage:
        """Return the page for *slug*; raise PageNotFound / UpstreamError."""
        if not is_valid_slug(slug):
            raise PageNotFound(slug)

        url = f"{self.base_url}/{slug}"
        log.debug("fetching %s", url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            log.warning("fetch of %s failed: %s", url, exc)
            raise UpstreamError(slug, f"Could not reach page source: {exc}") from exc

        if resp.status_code == 404:
            raise PageNotFound(slug)
        if resp.is_error:
            log.warning("fetch of %s returned HTTP %d", url, resp.status_code)
            raise UpstreamError(slug, f"Page source returned HTTP {resp.status_code}")

        try:
            return RemotePage.model_validate_json(resp.content)
        except ValidationError as exc:
            log.warning("invalid page body for %s: %s", slug, exc)
            raise UpstreamError(slug, "Page source returned an invalid body") from exc


# -----------------------------------------------------------------------------

def get_fetcher() -> PageFetcher:
    """FastAPI dependency; tests override it with a fake."""
    return PageFetcher()


# -----------------------------------------------------------------------------
