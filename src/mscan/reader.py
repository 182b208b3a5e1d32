"""Read source files into text.

MATLAB files are frequently saved in the author's locale codepage rather
than UTF-8, so decoding falls back through common codepages before giving
up to Latin-1.
"""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)

_FALLBACK_CODEPAGES = ("gbk", "cp1252", "cp1251", "cp1250", "cp932",
                       "cp949", "cp950", "latin-1")
_SAMPLE_SIZE = 8192


def decode_source(source: bytes) -> str:
    """Decode raw bytes: BOM, strict UTF-8, best-scoring codepage, Latin-1."""
    if not source:
        return ""

    if source[:3] == b"\xef\xbb\xbf":
        return source[3:].decode("utf-8", errors="replace")
    if source[:2] in (b"\xff\xfe", b"\xfe\xff"):
        return source.decode("utf-16", errors="replace")

    try:
        return source.decode("utf-8")
    except UnicodeDecodeError:
        pass

    best_cp = None
    best_score = -1
    sample = source[:_SAMPLE_SIZE]
    for cp in _FALLBACK_CODEPAGES:
        try:
            text = sample.decode(cp)
        except (UnicodeDecodeError, LookupError):
            continue
        # printable fraction, not count: CJK codepages decode to fewer characters
        score = sum(1 for ch in text if ch.isprintable() or ch in "\n\r\t") / max(1, len(text))
        if score > best_score:
            best_score = score
            best_cp = cp

    if best_cp and best_cp != "latin-1":
        try:
            text = source.decode(best_cp)
            log.debug("Decoded source as %s", best_cp)
            return text
        except UnicodeDecodeError:
            pass

    return source.decode("latin-1")


def read_content(path: str | Path) -> str:
    """Read *path* and return its text with line endings normalised to ``\\n``.

    OSError from opening the file propagates.
    """
    text = decode_source(Path(path).read_bytes())
    return text.replace("\r\n", "\n").replace("\r", "\n")
