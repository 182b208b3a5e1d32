"""Dialect configuration: keyword table, source extension, comment marker.

The MATLAB defaults live in :data:`DEFAULT_DIALECT`.  A project can adjust
them with a ``.mscan.json`` file placed in the source tree (or named by the
``MSCAN_CONFIG`` environment variable)::

    {
        "extension": ".m",
        "extra_keywords": ["methods", "properties"],
        "comment": "%"
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_NAME = ".mscan.json"
CONFIG_ENV = "MSCAN_CONFIG"

KEYWORDS: frozenset[str] = frozenset(
    {
        "break",
        "case",
        "catch",
        "classdef",
        "continue",
        "else",
        "elseif",
        "end",
        "for",
        "function",
        "global",
        "if",
        "otherwise",
        "parfor",
        "persistent",
        "return",
        "spmd",
        "switch",
        "try",
        "while",
    }
)

_ALLOWED_KEYS = {"extension", "extra_keywords", "comment"}


@dataclass(frozen=True)
class Dialect:
    keywords: frozenset[str] = field(default=KEYWORDS)
    extension: str = ".m"
    comment: str = "%"


DEFAULT_DIALECT = Dialect()


def find_config(start: str = ".") -> Path | None:
    """Walk up from *start* looking for a .mscan.json file.

    Returns the config file path, or None.
    """
    current = Path(start).resolve()
    if current.is_file():
        current = current.parent
    while True:
        candidate = current / CONFIG_NAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def _validate_config(cfg: Any) -> None:
    if not isinstance(cfg, dict):
        raise ValueError("config must be a JSON object")
    unknown = set(cfg) - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
    ext = cfg.get("extension", ".m")
    if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
        raise ValueError("'extension' must be a string like '.m'")
    extra = cfg.get("extra_keywords", [])
    if not isinstance(extra, list) or not all(isinstance(k, str) for k in extra):
        raise ValueError("'extra_keywords' must be a list of strings")
    comment = cfg.get("comment", "%")
    if not isinstance(comment, str) or not comment:
        raise ValueError("'comment' must be a non-empty string")


def load_dialect(path: str | Path) -> Dialect:
    """Read and validate a config file into a :class:`Dialect`.

    Raises FileNotFoundError or ValueError on problems.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"No config at {config_path}")
    try:
        cfg = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON in {config_path}: {exc}") from exc
    _validate_config(cfg)
    return Dialect(
        keywords=KEYWORDS | frozenset(cfg.get("extra_keywords", [])),
        extension=cfg.get("extension", DEFAULT_DIALECT.extension),
        comment=cfg.get("comment", DEFAULT_DIALECT.comment),
    )


def resolve_dialect(start: str = ".") -> Dialect:
    """Dialect for sources under *start*: $MSCAN_CONFIG, then .mscan.json, then defaults."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return load_dialect(override)
    found = find_config(start)
    if found is None:
        return DEFAULT_DIALECT
    return load_dialect(found)
