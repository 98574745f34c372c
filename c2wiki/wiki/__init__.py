"""
WardWiki markup engine.

    tree  = parse(source)
    nodes = render(tree, known_pages=names)
    html  = to_html(nodes)
"""
from __future__ import annotations

import re
from typing import Iterable, Optional

from c2wiki.wiki.builder import DocumentBuilder, parse
from c2wiki.wiki.inline import is_url, is_wiki_word, recognize
from c2wiki.wiki.nodes import Bold, HorizontalRule, Italic, Link, List, Node, Paragraph, Root
from c2wiki.wiki.renderer import Element, render, to_html
from c2wiki.wiki.scanner import preprocess

_HUMP_RE = re.compile(r"([a-z])([A-Z])")


def split_pascal(slug: str) -> str:
    """Insert a space at every lowercase → uppercase boundary: WardWiki → Ward Wiki."""
    return _HUMP_RE.sub(r"\1 \2", slug)


def render_html(text: str, known_pages: Optional[Iterable[str]] = None) -> str:
    """Parse and render WardWiki *text* straight to an HTML fragment."""
    return to_html(render(parse(text), known_pages))


__all__ = [
    "Node", "Root", "Paragraph", "Bold", "Italic", "Link", "List", "HorizontalRule",
    "DocumentBuilder", "parse", "preprocess",
    "recognize", "is_url", "is_wiki_word",
    "Element", "render", "to_html", "render_html",
    "split_pascal",
]
