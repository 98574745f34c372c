#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the word scanner and source preprocessing."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from c2wiki.wiki.scanner import Token, TokenKind, list_depth, next_token, preprocess, scan_line


# -----------------------------------------------------------------------------

def _words(line: str) -> list[tuple[str, str]]:
    return [(t.kind.value, t.text) for t in scan_line(line)]


# =============================================================================
# Words and spacing
# =============================================================================

def test_words_keep_leading_space():
    assert _words("see WardWiki page") == [
        ("word", "see"),
        ("word", " WardWiki"),
        ("word", " page"),
    ]


def test_double_space_becomes_its_own_word():
    assert "".join(t.text for t in scan_line("a  b")) == "a  b"
    assert _words("a  b") == [("word", "a"), ("word", " "), ("word", " b")]


def test_apostrophe_splits_a_word():
    assert _words("don't") == [("word", "don"), ("word", "'t")]


def test_star_inside_a_line_is_a_delimiter():
    assert _words("a*b") == [("word", "a"), ("word", "*b")]


def test_next_token_returns_new_position():
    token, pos = next_token("a b", 1)
    assert token == Token(TokenKind.WORD, " b")
    assert pos == 3


# =============================================================================
# Markers
# =============================================================================

def test_bold_toggle_tested_before_italic():
    assert _words("'''x'''") == [("bold", "'''"), ("word", "x"), ("bold", "'''")]


def test_italic_toggle():
    assert _words("''x''") == [("italic", "''"), ("word", "x"), ("italic", "''")]


def test_five_apostrophes_are_bold_then_italic():
    assert [t.kind for t in scan_line("'''''")] == [TokenKind.BOLD, TokenKind.ITALIC]


def test_hrule_marker():
    assert _words("----") == [("hrule", "----")]


def test_extra_dashes_after_hrule_are_a_word():
    assert _words("-----x") == [("hrule", "----"), ("word", "-x")]


def test_three_dashes_are_a_word():
    assert _words("---") == [("word", "---")]


# =============================================================================
# List markers and preprocessing
# =============================================================================

def test_list_depth_counts_leading_stars():
    assert list_depth("*** item") == 3
    assert list_depth("* item") == 1
    assert list_depth("item *") == 0
    assert list_depth("") == 0


def test_preprocess_collapses_six_apostrophes():
    assert preprocess("''''''s") == "'s"
    assert preprocess("a''''''b''''''c") == "a'b'c"


def test_preprocess_drops_carriage_returns():
    assert preprocess("one\r\ntwo\r\n") == "one\ntwo\n"


# -----------------------------------------------------------------------------
