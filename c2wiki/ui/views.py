#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Jinja2 UI views (server-rendered HTML pages)
============================================
GET  /           — redirect to the front page
GET  /{slug}     — view a page
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from c2wiki.core.config import get_settings
from c2wiki.core.errors import PageNotFound, WikiError
from c2wiki.services import pages as page_svc
from c2wiki.services.fetch import PageFetcher, get_fetcher

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _ctx(**extra) -> dict:
    """Base template context (request passed separately as first arg to TemplateResponse)."""
    settings = get_settings()
    return {
        "site_name": settings.site_name,
        "app_version": settings.app_version,
        **extra,
    }


def error_response(request: Request, message: str, status_code: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        _ctx(title=f"{get_settings().site_name} - Error", message=message),
        status_code=status_code,
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Home
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/", response_class=HTMLResponse)
async def home():
    return RedirectResponse(url=f"/{get_settings().front_page}", status_code=302)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Page view
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.get("/{slug}", response_class=HTMLResponse)
async def view_page(
    request: Request,
    slug: str,
    fetcher: PageFetcher = Depends(get_fetcher),
):
    try:
        page = await page_svc.get_page(fetcher, slug)
    except PageNotFound as e:
        return error_response(request, e.message, 404)
    except WikiError as e:
        log.error("could not load %s: %s", slug, e.message)
        return error_response(request, "The page source is unavailable right now.", e.status_code)

    return templates.TemplateResponse(
        request,
        "page.html",
        _ctx(title=page_svc.page_title(slug), page=page),
    )


# -----------------------------------------------------------------------------
