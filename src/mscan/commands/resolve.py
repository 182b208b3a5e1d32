"""Shared helpers for commands: reading the source file and its dialect."""

from __future__ import annotations

import click

from mscan.config import Dialect, resolve_dialect
from mscan.exit_codes import ConfigError, UnreadableSourceError
from mscan.output.formatter import json_envelope, to_json
from mscan.reader import read_content


def load_source(path: str) -> tuple[str, Dialect]:
    """Read *path* and resolve the dialect that applies to it.

    Converts I/O and config failures into CLI errors with exit codes.
    """
    try:
        content = read_content(path)
    except OSError as exc:
        raise UnreadableSourceError(path, exc.strerror or str(exc)) from exc
    try:
        dialect = resolve_dialect(path)
    except (OSError, ValueError) as exc:
        raise ConfigError(str(exc)) from exc
    return content, dialect


def json_mode(ctx) -> bool:
    return bool(ctx.obj.get("json")) if ctx.obj else False


def emit_json(command: str, path: str, summary: dict, **payload) -> None:
    click.echo(to_json(json_envelope(command, summary=summary, file=path, **payload)))
