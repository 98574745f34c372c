#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page service
============
Turns fetched page source into the rendered page shown to readers.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from c2wiki.core.config import get_settings
from c2wiki.schemas import PageResponse, RemotePage, RenderResponse
from c2wiki.services.fetch import PageFetcher
from c2wiki.wiki import parse, render, split_pascal, to_html


# -----------------------------------------------------------------------------

def page_title(slug: str) -> str:
    return f"{get_settings().site_name} - {split_pascal(slug)}"


def render_source(content: str, known_pages: list[str] | None = None) -> RenderResponse:
    tree = parse(content)
    html = to_html(render(tree, known_pages or None))
    return RenderResponse(html=html, tree=tree.to_table())


def build_page(slug: str, remote: RemotePage) -> PageResponse:
    rendered = render_source(remote.text, remote.names)
    return PageResponse(
        slug=slug,
        title=split_pascal(slug),
        date=remote.date,
        html=rendered.html,
        tree=rendered.tree,
    )


async def get_page(fetcher: PageFetcher, slug: str) -> PageResponse:
    remote = await fetcher.fetch(slug)
    return build_page(slug, remote)


# -----------------------------------------------------------------------------
