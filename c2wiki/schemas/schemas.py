#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for upstream payloads and API responses.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Upstream
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RemotePage(BaseModel):
    """Body returned by the page source for one slug."""
    text: str
    date: str = ""
    names: list[str] = Field(default_factory=list)   # known page names, optional


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Rendering
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RenderResponse(BaseModel):
    html: str
    tree: dict[str, Any]


# -----------------------------------------------------------------------------

class PageResponse(BaseModel):
    slug: str
    title: str
    date: str
    html: str
    tree: dict[str, Any]


# -----------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    app: str
