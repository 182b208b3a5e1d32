"""Tests for the shared scanning helpers."""

from __future__ import annotations

import re

from mscan.analysis.text_utils import match_all, row_col, unique, word_pattern
from mscan.models import Position


def test_unique_keeps_first_occurrence():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_unique_accepts_generators():
    assert unique(s for s in "abca") == ["a", "b", "c"]


def test_match_all_returns_every_match():
    matches = match_all("a1 b2 c3", re.compile(r"([a-z])(\d)"))
    assert [m.group(1) for m in matches] == ["a", "b", "c"]


def test_match_all_no_match():
    assert match_all("abc", re.compile(r"\d")) == []


def test_row_col():
    content = "one\ntwo\nthree"
    assert row_col(content, 0) == Position(0, 0)
    assert row_col(content, content.index("wo")) == Position(1, 1)
    assert row_col(content, content.index("three")) == Position(2, 0)


def test_word_pattern_escapes():
    assert re.search(word_pattern("a.b"), "xa.by a.b").start() == 6
