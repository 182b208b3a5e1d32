"""Struct-like dotted access: names and the members used with them.

A struct "exists" as soon as an identifier is followed by a dot anywhere in
the file; there is no type inference.
"""

from __future__ import annotations

import logging
import os
import re

from mscan.analysis.text_utils import match_all, unique
from mscan.config import DEFAULT_DIALECT
from mscan.models import StructCompletion

log = logging.getLogger(__name__)

_RE_STRUCT_NAME = re.compile(r"([a-zA-Z_][0-9a-zA-Z_]*)\.")


def _own_name(file_name: str, extension: str) -> str:
    # "foo.m" -> "foo"; names without the extension lose their last two characters
    base = os.path.basename(file_name)
    if base.endswith(extension):
        return base[: -len(extension)]
    return base[:-2]


def discover_struct_names(
    file_name: str, content: str, extension: str = DEFAULT_DIALECT.extension
) -> list[str]:
    """Identifiers used with dot access, first-seen order, minus the file's own name."""
    own = _own_name(file_name, extension)
    names = unique(m.group(1) for m in match_all(content, _RE_STRUCT_NAME))
    return [n for n in names if n != own]


def find_members(content: str, struct_name: str) -> list[str]:
    """Field names accessed on *struct_name*; method-style calls are left out."""
    regex = re.compile(rf"\s?{re.escape(struct_name)}\.(\S+);?", re.MULTILINE)
    members = [m.group(1).replace(";", "", 1).replace(":", "", 1) for m in match_all(content, regex)]
    return unique(m for m in members if "(" not in m)


def build_completions(
    file_name: str, content: str, extension: str = DEFAULT_DIALECT.extension
) -> list[StructCompletion]:
    completions = [
        StructCompletion(name=name, members=tuple(find_members(content, name)))
        for name in discover_struct_names(file_name, content, extension)
    ]
    log.debug("Discovered %d struct(s) in %s", len(completions), file_name)
    return completions
