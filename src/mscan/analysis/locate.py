"""Declaration lookup and whole-word occurrence search."""

from __future__ import annotations

import re

from mscan.analysis.text_utils import row_col, word_pattern
from mscan.models import Position

FUNCTION_MARKER = "function "


def _locate_assignment(content: str, word: str) -> Position | None:
    m = re.search(rf"\b{re.escape(word)}\s*=", content, re.MULTILINE)
    if m is None:
        return None
    return row_col(content, m.start())


def _locate_in_function_header(content: str, word: str) -> Position | None:
    if FUNCTION_MARKER not in content:
        return None
    regex = re.compile(word_pattern(word))
    for i, line in enumerate(content.split("\n")):
        if FUNCTION_MARKER not in line:
            continue
        m = regex.search(line)
        # only the first header is examined; index 0 would be the keyword position
        if m and m.start():
            return Position(row=i, column=m.start())
        break
    return None


def locate(content: str, word: str) -> Position | None:
    """Find where *word* is declared.

    Tries ``word = ...`` first, then the first ``function`` header line.
    Returns None when neither matches.
    """
    return _locate_assignment(content, word) or _locate_in_function_header(content, word)


def find_occurrences(content: str, name: str) -> list[Position]:
    """Every whole-word occurrence of *name*, row-major then left to right."""
    regex = re.compile(word_pattern(name))
    return [
        Position(row=i, column=m.start())
        for i, line in enumerate(content.split("\n"))
        for m in regex.finditer(line)
    ]
