#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Document builder
================
Single-pass state machine that turns WardWiki source into a document tree.

The builder keeps an explicit stack of open contexts with ``Root`` at the
bottom.  Nodes are attached to their parent as soon as they are created, so
closing a context is just a pop; whatever is still open when the input ends
is already part of the tree.

Line rules
----------
blank line     closes the open paragraph; enclosing lists stay open
``*`` line     resolves the list depth (see ``_enter_list``), text becomes a
               new item of that list
other line     closes every list and starts a fresh paragraph

At the end of each line any unclosed ``'''`` / ``''`` span is closed, and at
the end of the input the stack unwinds back to ``Root``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from .inline import recognize
from .nodes import EMPHASIS, Bold, HorizontalRule, Italic, List, Node, Paragraph, Root
from .scanner import TokenKind, list_depth, preprocess, scan_line

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

class DocumentBuilder:

    def __init__(self) -> None:
        self.root = Root()
        self.stack: list[Node] = [self.root]

    @property
    def active(self) -> Node:
        return self.stack[-1]

    # ── stack helpers ─────────────────────────────────────────────────────

    def _open(self, node: Node) -> Node:
        self.active.append(node)
        self.stack.append(node)
        return node

    def _close(self) -> None:
        if len(self.stack) > 1:
            self.stack.pop()

    def _close_while(self, kinds: tuple[type, ...]) -> None:
        while len(self.stack) > 1 and isinstance(self.active, kinds):
            self.stack.pop()

    def _close_all(self) -> None:
        del self.stack[1:]

    @property
    def _list_depth(self) -> int:
        return self.active.depth if isinstance(self.active, List) else 0

    # ── list nesting ──────────────────────────────────────────────────────

    def _enter_list(self, depth: int) -> None:
        """Make the list at *depth* the active context."""
        # Close the previous item (paragraph plus any emphasis inside it)
        self._close_while((Paragraph, *EMPHASIS))

        while isinstance(self.active, List) and self.active.depth > depth:
            self._close()

        current = self._list_depth
        if current == depth:
            return

        # Deeper: nest under the last item of the current list, or directly
        # under the current context when there is no item yet.
        parent = self.active
        if isinstance(parent, List) and parent.last_node is not None:
            parent = parent.last_node
        for d in range(current + 1, depth + 1):
            node = List(depth=d)
            parent.append(node)
            self.stack.append(node)
            parent = node

    # ── lines ─────────────────────────────────────────────────────────────

    def feed_line(self, line: str) -> None:
        line = line.lstrip()

        if not line:
            if isinstance(self.active, Paragraph):
                self._close()
            return

        depth = list_depth(line)
        if depth:
            self._enter_list(depth)
            line = line[depth:].lstrip(" \t")
        else:
            self._close_all()

        for token in scan_line(line):
            if isinstance(self.active, (Root, List)):
                self._open(Paragraph())

            if token.kind is TokenKind.BOLD:
                self._toggle(Bold)
            elif token.kind is TokenKind.ITALIC:
                self._toggle(Italic)
            elif token.kind is TokenKind.HRULE:
                self.active.append(HorizontalRule())
            else:
                self.active.extend(recognize(token.text))

        self._close_while(EMPHASIS)

    def _toggle(self, kind: type[Node]) -> None:
        if isinstance(self.active, kind):
            self._close()
        else:
            self._open(kind())

    def finish(self) -> Root:
        self._close_all()
        return self.root


# -----------------------------------------------------------------------------

def parse(text: str) -> Root:
    """Parse WardWiki *text* into a document tree."""
    builder = DocumentBuilder()
    lines = preprocess(text).split("\n")
    for line in lines:
        builder.feed_line(line)
    root = builder.finish()
    log.debug("parsed %d line(s) into %d top-level node(s)", len(lines), len(root.children))
    return root
