#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Word scanner
============
Splits one line of WardWiki source into tokens.

Token kinds
-----------
BOLD    ``'''``  emphasis toggle (tested before ITALIC)
ITALIC  ``''``   emphasis toggle
HRULE   ``----`` horizontal rule
WORD    the character under the cursor plus every following character up to
        the next delimiter (space, apostrophe, star, CR, LF).  A word may
        therefore start with a space, which keeps inter-word spacing intact.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple


# -----------------------------------------------------------------------------

BOLD_MARK   = "'''"
ITALIC_MARK = "''"
HRULE_MARK  = "----"
LIST_MARK   = "*"

_DELIMITERS = frozenset(" '*\r\n")


class TokenKind(str, Enum):
    BOLD   = "bold"
    ITALIC = "italic"
    HRULE  = "hrule"
    WORD   = "word"


class Token(NamedTuple):
    kind: TokenKind
    text: str


# -----------------------------------------------------------------------------

def preprocess(text: str) -> str:
    """Collapse six-apostrophe escapes to one apostrophe and drop carriage returns."""
    return text.replace("''''''", "'").replace("\r", "")


def list_depth(line: str) -> int:
    """Count the run of list markers at the start of *line*."""
    depth = 0
    while depth < len(line) and line[depth] == LIST_MARK:
        depth += 1
    return depth


def next_token(line: str, pos: int) -> tuple[Token, int]:
    """Return the token starting at *pos* and the position just after it."""
    if line.startswith(BOLD_MARK, pos):
        return Token(TokenKind.BOLD, BOLD_MARK), pos + len(BOLD_MARK)
    if line.startswith(ITALIC_MARK, pos):
        return Token(TokenKind.ITALIC, ITALIC_MARK), pos + len(ITALIC_MARK)
    if line.startswith(HRULE_MARK, pos):
        return Token(TokenKind.HRULE, HRULE_MARK), pos + len(HRULE_MARK)

    end = pos + 1
    while end < len(line) and line[end] not in _DELIMITERS:
        end += 1
    return Token(TokenKind.WORD, line[pos:end]), end


def scan_line(line: str, pos: int = 0) -> Iterator[Token]:
    while pos < len(line):
        token, pos = next_token(line, pos)
        yield token
