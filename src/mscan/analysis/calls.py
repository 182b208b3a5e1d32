"""Multi-return call sites: ``[a, b] = f(x, y)``."""

from __future__ import annotations

import re

from mscan.analysis.text_utils import match_all
from mscan.models import FunctionCall

# '.' does not cross newlines, so each match stays on one line
_RE_MULTI_RETURN = re.compile(r"\[(.+)\]\s*=\s*(\S+)\((.*)\)")
_RE_SPACE = re.compile(r"\s")


def _split_list(text: str) -> tuple[str, ...]:
    return tuple(_RE_SPACE.sub("", text).split(","))


def extract_multi_return_calls(content: str) -> list[FunctionCall]:
    """Every bracketed multi-assignment call in *content*.

    Single-return (``a = f(x)``) and paren-less calls are not recognised.
    Segments are split on commas without validating them as identifiers.
    """
    return [
        FunctionCall(name=m.group(2), params=_split_list(m.group(3)), returns=_split_list(m.group(1)))
        for m in match_all(content, _RE_MULTI_RETURN)
    ]
