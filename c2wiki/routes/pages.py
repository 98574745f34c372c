#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pages router
============
GET    /api/v1/pages/{slug}     — fetch a page from the source and render it
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from c2wiki.core.errors import WikiError
from c2wiki.schemas import PageResponse
from c2wiki.services import pages as page_svc
from c2wiki.services.fetch import PageFetcher, get_fetcher


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/pages", tags=["pages"])


# ── Read ──────────────────────────────────────────────────────────────────────

@router.get("/{slug}", response_model=PageResponse)
async def get_page(
    slug: str,
    fetcher: PageFetcher = Depends(get_fetcher),
):
    try:
        return await page_svc.get_page(fetcher, slug)
    except WikiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# -----------------------------------------------------------------------------
