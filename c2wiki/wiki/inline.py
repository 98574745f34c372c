#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Inline recognizer
=================
Classifies a scanned word as a WikiWord link, a bare URL link or plain text.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from typing import Union
from urllib.parse import urlsplit

from .nodes import Link


# -----------------------------------------------------------------------------

# Two or more capitalised humps: WardWiki, ExtremeProgrammingRoadmap
WIKIWORD_RE = re.compile(r"[A-Z][a-z]+[A-Z][a-z][A-Za-z]+")

_URL_SCHEMES = ("http", "https")
_LEADING_SPACE_RE = re.compile(r"^\s*")


# -----------------------------------------------------------------------------

def is_wiki_word(text: str) -> bool:
    return WIKIWORD_RE.fullmatch(text) is not None


def is_url(text: str) -> bool:
    """True if *text* parses as an absolute http(s) URL with a host."""
    try:
        parts = urlsplit(text)
        parts.port   # raises ValueError on a malformed port
    except ValueError:
        return False
    return parts.scheme in _URL_SCHEMES and bool(parts.hostname)


def recognize(word: str) -> list[Union[Link, str]]:
    """
    Split *word* into literal text and links.

    Only the first WikiWord in the word is linked; text around it is kept as
    literal prefix / suffix.  A word without a WikiWord becomes an external
    link when it is an http(s) URL, otherwise it stays literal.
    """
    m = WIKIWORD_RE.search(word)
    if m:
        pieces: list[Union[Link, str]] = []
        if m.start():
            pieces.append(word[:m.start()])
        pieces.append(Link(href="/" + m.group(0), children=[m.group(0)]))
        if m.end() != len(word):
            pieces.append(word[m.end():])
        return pieces

    lead = _LEADING_SPACE_RE.match(word).group(0)
    candidate = word[len(lead):]
    if candidate and is_url(candidate):
        pieces = [lead] if lead else []
        pieces.append(Link(href=candidate, children=[candidate]))
        return pieces

    return [word]
