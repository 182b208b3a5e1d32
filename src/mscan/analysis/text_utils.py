"""Small helpers shared by the scanners."""

from __future__ import annotations

import re
from typing import Iterable

from mscan.models import Position


def match_all(content: str, regex: re.Pattern) -> list[re.Match]:
    """Every non-overlapping match of *regex* in *content*, in order."""
    return list(regex.finditer(content))


def unique(items: Iterable[str]) -> list[str]:
    """Drop repeats, keeping the first occurrence of each item."""
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


def word_pattern(word: str) -> str:
    """Regex source for a whole-word match of *word*."""
    return rf"\b{re.escape(word)}\b"


def row_col(content: str, offset: int) -> Position:
    """Map a character offset to a zero-based row/column."""
    before = content[:offset].split("\n")
    return Position(row=len(before) - 1, column=len(before[-1]))
