"""Extract search directories from ``addpath`` directives."""

from __future__ import annotations

import logging
import re

from mscan.config import DEFAULT_DIALECT

log = logging.getLogger(__name__)

# addpath("dir") / addpath('dir'), leading whitespace already stripped
_RE_ADDPATH = re.compile(r"""addpath\(["'](\S+)["']\)""")


def resolve_added_paths(content: str, comment: str = DEFAULT_DIALECT.comment) -> list[str]:
    """Return the quoted directory of every ``addpath`` line, in order.

    Lines whose first non-blank text is the *comment* marker are skipped.
    Duplicates are kept.
    """
    paths: list[str] = []
    for line in content.split("\n"):
        stripped = line.lstrip()
        if stripped.startswith(comment):
            continue
        m = _RE_ADDPATH.match(stripped)
        if m:
            paths.append(m.group(1))
    log.debug("Found %d addpath directive(s)", len(paths))
    return paths
