#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for c2wiki tests.
The upstream page source is replaced by an in-memory fake, so no network is needed.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from c2wiki.core.errors import PageNotFound, UpstreamError
from c2wiki.main import create_app
from c2wiki.schemas import RemotePage
from c2wiki.services.fetch import get_fetcher


# -----------------------------------------------------------------------------

class FakeFetcher:
    """Serves pages from a dict; slugs mapped to an exception raise it."""

    def __init__(self, pages: dict) -> None:
        self.pages = pages
        self.requested: list[str] = []

    async def fetch(self, slug: str) -> RemotePage:
        self.requested.append(slug)
        page = self.pages.get(slug)
        if page is None:
            raise PageNotFound(slug)
        if isinstance(page, Exception):
            raise page
        return page


# -----------------------------------------------------------------------------

@pytest.fixture
def fake_fetcher():
    return FakeFetcher({
        "WelcomeVisitors": RemotePage(
            text="Welcome to the WikiWikiWeb.\n\n* Read RecentChanges\n* Try http://c2.com",
            date="2014-10-28T00:00:00Z",
        ),
        "WardCunningham": RemotePage(
            text="'''Ward''' started the PortlandPatternRepository.",
            date="2013-01-01",
            names=["WardCunningham"],
        ),
        "BrokenPage": UpstreamError("BrokenPage", "Page source returned HTTP 500"),
    })


@pytest_asyncio.fixture(scope="function")
async def client(fake_fetcher):
    """HTTP test client wired to the fake page source."""
    app = create_app()
    app.dependency_overrides[get_fetcher] = lambda: fake_fetcher

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Helper functions for tests
# -----------------------------------------------------------------------------

def kinds(node) -> list:
    """Child kinds of *node*: node kind names, or 'text' for literal spans."""
    return ["text" if isinstance(c, str) else c.kind for c in node.children]


# -----------------------------------------------------------------------------
