#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the page API, live render endpoint and UI views."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest


# ── System ────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["app"] == "c2wiki"


# ── Live render ───────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_render_preview(client, fake_fetcher):
    resp = await client.get("/api/v1/render", params={"content": "'''hi''' WardWiki"})
    assert resp.status_code == 200
    data = resp.json()
    assert "<strong>hi</strong>" in data["html"]
    assert 'href="/WardWiki"' in data["html"]
    nodes = data["tree"]["nodes"]
    assert nodes[0]["type"] == "root"
    assert nodes[nodes[0]["children"][0]]["type"] == "paragraph"
    assert fake_fetcher.requested == []


@pytest.mark.asyncio
async def test_render_preview_empty(client):
    resp = await client.get("/api/v1/render")
    assert resp.status_code == 200
    assert resp.json() == {"html": "", "tree": {"nodes": [{"type": "root", "children": []}]}}


@pytest.mark.asyncio
async def test_render_preview_very_deep_list(client):
    resp = await client.get("/api/v1/render", params={"content": "*" * 1000 + " x"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["html"].count("<ul>") == 1000
    assert '<div class="paragraph">x</div>' in data["html"]
    nodes = data["tree"]["nodes"]
    assert len(nodes) == 1002
    assert nodes[-1] == {"type": "paragraph", "children": ["x"]}


# ── Page API ──────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_page(client):
    resp = await client.get("/api/v1/pages/WelcomeVisitors")
    assert resp.status_code == 200
    data = resp.json()
    assert data["slug"] == "WelcomeVisitors"
    assert data["title"] == "Welcome Visitors"
    assert data["date"] == "2014-10-28T00:00:00Z"
    assert 'href="/WikiWikiWeb" class="wikilink"' in data["html"]
    assert 'href="http://c2.com" class="external"' in data["html"]
    assert "<ul><li>" in data["html"]
    nodes = data["tree"]["nodes"]
    assert [nodes[i]["type"] for i in nodes[0]["children"]] == ["paragraph", "list"]


@pytest.mark.asyncio
async def test_get_page_marks_unknown_links(client):
    resp = await client.get("/api/v1/pages/WardCunningham")
    assert resp.status_code == 200
    html = resp.json()["html"]
    assert 'href="/PortlandPatternRepository" class="wikilink missing"' in html
    assert "<strong>Ward</strong>" in html


@pytest.mark.asyncio
async def test_get_missing_page(client):
    resp = await client.get("/api/v1/pages/NoSuchPage")
    assert resp.status_code == 404
    assert "NoSuchPage" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_get_page_upstream_failure(client):
    resp = await client.get("/api/v1/pages/BrokenPage")
    assert resp.status_code == 502


# ── UI ────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_home_redirects_to_front_page(client):
    resp = await client.get("/")
    assert resp.status_code == 302
    assert resp.headers["location"] == "/WelcomeVisitors"


@pytest.mark.asyncio
async def test_view_page(client):
    resp = await client.get("/WelcomeVisitors")
    assert resp.status_code == 200
    assert "<title>C2 Wiki - Welcome Visitors</title>" in resp.text
    assert "<h1>Welcome Visitors</h1>" in resp.text
    assert 'class="wikilink"' in resp.text
    assert "Last edit 2014-10-28T00:00:00Z" in resp.text


@pytest.mark.asyncio
async def test_view_missing_page(client):
    resp = await client.get("/NoSuchPage")
    assert resp.status_code == 404
    assert "Page &#39;NoSuchPage&#39; not found" in resp.text


@pytest.mark.asyncio
async def test_view_upstream_failure(client):
    resp = await client.get("/BrokenPage")
    assert resp.status_code == 502
    assert "unavailable" in resp.text


@pytest.mark.asyncio
async def test_stylesheet_is_served(client):
    resp = await client.get("/static/retro.css")
    assert resp.status_code == 200
    assert "wikilink" in resp.text


# -----------------------------------------------------------------------------
