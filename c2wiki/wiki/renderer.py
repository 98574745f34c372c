#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Tree renderer
=============
Maps a parsed document tree onto generic output elements, and serialises
those elements to HTML.

    paragraph  → <div>
    bold       → <strong>
    italic     → <em>
    link       → <a class="wikilink">   (same-site, href starts with "/")
                 <a class="external">   (absolute URL, opens in a new tab)
    list       → <ul> with one <li> per child
    hrule      → <hr>

The root renders as a fragment (a plain list of its rendered children).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html as _html
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from .nodes import Bold, HorizontalRule, Italic, Link, List, Node, Paragraph, Root


# -----------------------------------------------------------------------------
# Output elements
#
# Lists nest as deep as the source asks for, so rendering and serialising
# walk the tree with an explicit stack instead of recursing.
# -----------------------------------------------------------------------------

_VOID_TAGS = frozenset({"hr"})
_DONE = object()


@dataclass
class Element:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Union["Element", str]] = field(default_factory=list)

    def open_tag(self) -> str:
        attrs = "".join(
            f' {name}="{_html.escape(value, quote=True)}"'
            for name, value in self.attrs.items()
        )
        return f"<{self.tag}{attrs}>"

    def to_html(self) -> str:
        return to_html([self])


Output = Union[Element, str]


def to_html(nodes: Iterable[Output]) -> str:
    parts: list[str] = []
    stack: list[tuple[Iterator[Output], str]] = [(iter(nodes), "")]
    while stack:
        children, close = stack[-1]
        node = next(children, _DONE)
        if node is _DONE:
            stack.pop()
            parts.append(close)
        elif isinstance(node, str):
            parts.append(_html.escape(node, quote=False))
        else:
            parts.append(node.open_tag())
            if node.tag not in _VOID_TAGS:
                stack.append((iter(node.children), f"</{node.tag}>"))
    return "".join(parts)


# -----------------------------------------------------------------------------
# Tree → elements
# -----------------------------------------------------------------------------

def _link_element(node: Link, known_pages: Optional[set[str]]) -> Element:
    if node.is_internal:
        classes = "wikilink"
        if known_pages is not None and node.href[1:] not in known_pages:
            classes += " missing"
        return Element("a", {"href": node.href, "class": classes})
    return Element(
        "a",
        {
            "href": node.href,
            "class": "external",
            "target": "_blank",
            "rel": "noopener noreferrer",
        },
    )


def _element_for(node: Node, known_pages: Optional[set[str]]) -> Element:
    """The element for *node*, without children."""
    if isinstance(node, Paragraph):
        return Element("div", {"class": "paragraph"})
    if isinstance(node, Bold):
        return Element("strong")
    if isinstance(node, Italic):
        return Element("em")
    if isinstance(node, Link):
        return _link_element(node, known_pages)
    if isinstance(node, List):
        return Element("ul")
    if isinstance(node, HorizontalRule):
        return Element("hr")
    # Root nested below the top level never happens; render it as a block
    return Element("div")


def render(tree: Node, known_pages: Optional[Iterable[str]] = None) -> list[Output]:
    """
    Render *tree* to a list of output elements.

    Parameters
    ----------
    tree        : a parsed document (normally a ``Root``)
    known_pages : optional collection of page names; when given, same-site
                  links to pages outside it get the extra ``missing`` class
    """
    names = set(known_pages) if known_pages is not None else None
    top = tree.children if isinstance(tree, Root) else [tree]

    out: list[Output] = []
    # (remaining children, list receiving their output, wrap each in <li>)
    stack: list[tuple[Iterator, list[Output], bool]] = [(iter(top), out, False)]
    while stack:
        children, target, as_items = stack[-1]
        child = next(children, _DONE)
        if child is _DONE:
            stack.pop()
            continue

        if as_items:
            item = Element("li")
            target.append(item)
            target = item.children

        if isinstance(child, str):
            target.append(child)
            continue

        element = _element_for(child, names)
        target.append(element)
        if child.children:
            stack.append((iter(child.children), element.children, isinstance(child, List)))
    return out
