"""Programmatic Python API.

Two entry points for editor integrations:

* :func:`summarize` / :func:`analyze_file` call the scanners directly and
  return plain dicts.
* :func:`run_json` runs a CLI command in-process and returns its parsed
  JSON envelope, for hosts that want exactly what ``mscan --json`` prints.
"""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from mscan.analysis.calls import extract_multi_return_calls
from mscan.analysis.functions import find_function_declarations
from mscan.analysis.paths import resolve_added_paths
from mscan.analysis.structs import build_completions
from mscan.config import DEFAULT_DIALECT, Dialect, resolve_dialect
from mscan.exit_codes import EXIT_NOT_FOUND
from mscan.reader import read_content


class MscanAPIError(RuntimeError):
    """Raised when a programmatic mscan invocation fails."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        exit_code: int | None = None,
        output: str | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command or []
        self.exit_code = exit_code
        self.output = output


def summarize(file_name: str, content: str, dialect: Dialect = DEFAULT_DIALECT) -> dict:
    """Functions, structs, multi-return calls and addpath entries of one file."""
    return {
        "functions": [d.to_dict() for d in find_function_declarations(content)],
        "structs": [c.to_dict() for c in build_completions(file_name, content, dialect.extension)],
        "calls": [c.to_dict() for c in extract_multi_return_calls(content)],
        "paths": resolve_added_paths(content, comment=dialect.comment),
    }


def analyze_file(path: str | Path) -> dict:
    """Read *path* and :func:`summarize` it under the dialect that applies there.

    OSError from reading and ValueError from a bad config propagate.
    """
    path = str(path)
    return summarize(path, read_content(path), resolve_dialect(path))


def _extract_json_dict(text: str) -> dict | None:
    """Parse the first JSON object found in possibly mixed command output."""
    decoder = json.JSONDecoder()
    for start in (i for i, ch in enumerate(text) if ch == "{"):
        try:
            obj, _ = decoder.raw_decode(text[start:])
        except ValueError:
            continue
        if isinstance(obj, dict):
            return obj
    return None


def run_json(command: str, *args: str, allow_not_found: bool = True) -> dict:
    """Run an mscan command in-process and return parsed JSON output.

    Parameters
    ----------
    command:
        CLI command name (e.g. ``"structs"``, ``"locate"``).
    *args:
        Command-specific arguments.
    allow_not_found:
        When True, a ``locate`` miss returns its envelope (with
        ``position`` set to None) instead of raising.
    """
    from mscan.cli import cli

    cmd = ["--json", command, *args]
    result = CliRunner().invoke(cli, cmd)
    output = result.output or ""

    ok = result.exit_code == 0 or (allow_not_found and result.exit_code == EXIT_NOT_FOUND)
    if not ok:
        raise MscanAPIError(
            f"mscan {command} failed with exit code {result.exit_code}",
            command=cmd,
            exit_code=result.exit_code,
            output=output,
        )

    payload = _extract_json_dict(output)
    if payload is None:
        raise MscanAPIError(
            f"mscan {command} did not return JSON",
            command=cmd,
            exit_code=result.exit_code,
            output=output,
        )
    return payload
