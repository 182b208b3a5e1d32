"""Plain-text and JSON formatting for CLI output."""

from __future__ import annotations

import json as _json
from datetime import datetime, timezone

ENVELOPE_SCHEMA_VERSION = "1.0.0"
ENVELOPE_SCHEMA_NAME = "mscan-envelope-v1"

# Conservative heuristic: 1 token ~ 4 characters.
_CHARS_PER_TOKEN = 4


def loc(path: str, row: int | None = None, column: int | None = None) -> str:
    """``path:line[:col]`` with 1-based numbers, as editors print them."""
    if row is None:
        return path
    if column is None:
        return f"{path}:{row + 1}"
    return f"{path}:{row + 1}:{column + 1}"


def section(title: str, lines: list[str], budget: int = 0) -> str:
    out = [title]
    if budget and len(lines) > budget:
        out.extend(lines[:budget])
        out.append(f"  (+{len(lines) - budget} more)")
    else:
        out.extend(lines)
    return "\n".join(out)


def format_table(headers: list[str], rows: list[list[str]], budget: int = 0) -> str:
    if not rows:
        return "(none)"
    widths = [len(h) for h in headers]
    num_cols = len(widths)
    for row in rows:
        for i, cell in enumerate(row):
            if i < num_cols:
                widths[i] = max(widths[i], len(str(cell)))
    lines = ["  ".join(h.ljust(widths[i]) for i, h in enumerate(headers)).rstrip()]
    lines.append("  ".join("-" * w for w in widths))
    display_rows = rows[:budget] if budget and len(rows) > budget else rows
    for row in display_rows:
        lines.append("  ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
    if budget and len(rows) > budget:
        lines.append(f"(+{len(rows) - budget} more)")
    return "\n".join(lines)


def to_json(data) -> str:
    """Serialize *data* with sorted keys so identical results print identically."""
    return _json.dumps(data, indent=2, default=str, sort_keys=True, ensure_ascii=False)


def estimate_tokens(text: str) -> int:
    return max(1, len(text) // _CHARS_PER_TOKEN)


def json_envelope(command: str, summary: dict | None = None, file: str = "", **payload) -> dict:
    """Wrap command output in a self-describing envelope.

    Non-deterministic metadata lives under ``_meta`` so the content keys
    stay stable across runs::

        {
            "schema": "mscan-envelope-v1",
            "command": "structs",
            "version": "<current>",
            "file": "src/foo.m",
            "summary": { ... },
            "_meta": {"timestamp": "...", "response_tokens": 42},
            ...payload
        }
    """
    from mscan import __version__

    out: dict = {
        "schema": ENVELOPE_SCHEMA_NAME,
        "schema_version": ENVELOPE_SCHEMA_VERSION,
        "command": command,
        "version": __version__,
        "file": file,
        "summary": summary or {},
    }
    out.update(payload)
    ts = datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
    out["_meta"] = {"timestamp": ts}
    out["_meta"]["response_tokens"] = estimate_tokens(_json.dumps(out, default=str, sort_keys=True))
    return out
