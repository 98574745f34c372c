#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Document tree
=============
Node types produced by the WardWiki parser.

Every node owns an ordered ``children`` list whose entries are either nodes
or literal text spans (plain ``str``).  Adjacent literal spans are merged as
they are appended and empty spans are dropped, so a finished tree never
contains two strings side by side or a zero-length string.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


# -----------------------------------------------------------------------------

@dataclass
class Node:
    kind: ClassVar[str] = "node"

    children: list[Union["Node", str]] = field(default_factory=list)

    def append(self, child: Union["Node", str]) -> None:
        """Append *child*, merging it into a trailing literal span if both are text."""
        if isinstance(child, str):
            if not child:
                return
            if self.children and isinstance(self.children[-1], str):
                self.children[-1] += child
                return
        self.children.append(child)

    def extend(self, children) -> None:
        for child in children:
            self.append(child)

    @property
    def last_node(self) -> "Node | None":
        """The last child if it is a node, else None."""
        if self.children and isinstance(self.children[-1], Node):
            return self.children[-1]
        return None

    # List nesting is unbounded, so the walks below use an explicit stack
    # rather than recursion.

    def text(self) -> str:
        """Concatenated literal text of the whole subtree."""
        parts: list[str] = []
        stack: list[Union[Node, str]] = list(reversed(self.children))
        while stack:
            child = stack.pop()
            if isinstance(child, str):
                parts.append(child)
            else:
                stack.extend(reversed(child.children))
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Nested ``{"type": ..., "children": [...]}`` form of the subtree."""
        data = self._shell()
        stack: list[tuple[Node, list]] = [(self, data["children"])]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                if isinstance(child, str):
                    out.append(child)
                else:
                    entry = child._shell()
                    out.append(entry)
                    stack.append((child, entry["children"]))
        return data

    def to_table(self) -> dict[str, Any]:
        """
        Flat form of the subtree: ``{"nodes": [...]}``.

        ``nodes[0]`` is this node.  In every entry's ``children`` a string is
        a literal span and an integer is the index of a child node, so the
        JSON stays shallow however deep the lists nest.
        """
        nodes = [self._shell()]
        stack: list[tuple[Node, list]] = [(self, nodes[0]["children"])]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                if isinstance(child, str):
                    out.append(child)
                else:
                    entry = child._shell()
                    out.append(len(nodes))
                    nodes.append(entry)
                    stack.append((child, entry["children"]))
        return {"nodes": nodes}

    def _shell(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.kind}
        data.update(self._fields())
        data["children"] = []
        return data

    def _fields(self) -> dict[str, Any]:
        return {}


# -----------------------------------------------------------------------------

@dataclass
class Root(Node):
    kind: ClassVar[str] = "root"


@dataclass
class Paragraph(Node):
    kind: ClassVar[str] = "paragraph"


@dataclass
class Bold(Node):
    kind: ClassVar[str] = "bold"


@dataclass
class Italic(Node):
    kind: ClassVar[str] = "italic"


@dataclass
class HorizontalRule(Node):
    kind: ClassVar[str] = "hrule"

    def append(self, child: Union[Node, str]) -> None:
        raise TypeError("HorizontalRule is a leaf and takes no children")


# -----------------------------------------------------------------------------

@dataclass
class Link(Node):
    """An inline hyperlink.  ``href`` starting with ``/`` is a page on this wiki."""

    kind: ClassVar[str] = "link"

    href: str = ""

    @property
    def is_internal(self) -> bool:
        return self.href.startswith("/")

    def _fields(self) -> dict[str, Any]:
        return {"href": self.href}


@dataclass
class List(Node):
    """One nesting level of a bulleted list; each child is one item."""

    kind: ClassVar[str] = "list"

    depth: int = 1

    def _fields(self) -> dict[str, Any]:
        return {"depth": self.depth}


# -----------------------------------------------------------------------------

EMPHASIS = (Bold, Italic)
