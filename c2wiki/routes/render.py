#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoint — live preview of WardWiki markup.

GET /api/v1/render?content=...
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Query

from c2wiki.schemas import RenderResponse
from c2wiki.services.pages import render_source


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# -----------------------------------------------------------------------------

@router.get("", response_model=RenderResponse)
async def render_preview(
    content: str = Query(default="", max_length=1_000_000),
):
    """Return the document tree and rendered HTML for a snippet of WardWiki markup."""
    return render_source(content)


# -----------------------------------------------------------------------------
