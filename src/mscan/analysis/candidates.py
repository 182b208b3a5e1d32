"""Completion candidates: sibling/addpath source files plus local identifiers."""

from __future__ import annotations

import logging
import os

from mscan.analysis.paths import resolve_added_paths
from mscan.analysis.text_utils import unique
from mscan.analysis.tokens import extract_identifiers
from mscan.config import DEFAULT_DIALECT, Dialect

log = logging.getLogger(__name__)


def search_directories(file_name: str, content: str, dialect: Dialect = DEFAULT_DIALECT) -> list[str]:
    """The file's own directory followed by every ``addpath`` directory.

    Relative ``addpath`` entries are resolved against the file's directory.
    """
    base_dir = os.path.dirname(file_name) or "."
    dirs = [base_dir]
    for entry in resolve_added_paths(content, comment=dialect.comment):
        if not os.path.isabs(entry):
            entry = os.path.normpath(os.path.join(base_dir, entry))
        dirs.append(entry)
    return dirs


def list_source_names(directory: str, extension: str = DEFAULT_DIALECT.extension) -> list[str]:
    """Bare names of the source files directly inside *directory*.

    Listing errors (missing or unreadable directory) propagate.
    """
    names = [
        entry[: -len(extension)]
        for entry in sorted(os.listdir(directory))
        if entry.endswith(extension)
    ]
    log.debug("Listed %d source file(s) in %s", len(names), directory)
    return names


def list_candidates(file_name: str, content: str, dialect: Dialect = DEFAULT_DIALECT) -> list[str]:
    """Completion candidates for *file_name*: reachable source files, then identifiers."""
    names: list[str] = []
    for directory in search_directories(file_name, content, dialect):
        names.extend(list_source_names(directory, dialect.extension))
    names.extend(extract_identifiers(content, dialect.keywords))
    return unique(names)
