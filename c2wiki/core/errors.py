#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Errors raised while fetching pages from the upstream wiki.

The markup engine itself never raises; these only cover the page source.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations


# -----------------------------------------------------------------------------

class WikiError(Exception):
    status_code = 500

    def __init__(self, slug: str, message: str) -> None:
        super().__init__(message)
        self.slug = slug
        self.message = message


class PageNotFound(WikiError):
    status_code = 404

    def __init__(self, slug: str) -> None:
        super().__init__(slug, f"Page '{slug}' not found")


class UpstreamError(WikiError):
    status_code = 502


# -----------------------------------------------------------------------------
