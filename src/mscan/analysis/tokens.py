"""Identifier tokenizer used as a fallback completion source."""

from __future__ import annotations

import re

from mscan.analysis.text_utils import unique
from mscan.config import KEYWORDS

_RE_IDENT = re.compile(r"\b([\w_]+)\b", re.ASCII)
# At least two characters starting from a non-digit somewhere in the token.
_RE_KEEP = re.compile(r"[^0-9]\S+")


def extract_identifiers(content: str, keywords: frozenset[str] = KEYWORDS) -> list[str]:
    """Every distinct word-like token in *content*, minus *keywords*.

    Deliberately overcollects: any mention counts, not just declarations.
    Single-character and purely numeric tokens are dropped.
    """
    tokens = unique(m.group(1) for m in _RE_IDENT.finditer(content))
    return [t for t in tokens if _RE_KEEP.search(t) and t not in keywords]
