"""Standardized CLI exit codes for mscan.

Exit code scheme:

    0  SUCCESS     -- command completed (an empty result is still success)
    1  ERROR       -- unexpected failure, crash, unhandled exception
    2  USAGE_ERROR -- invalid arguments, bad flags, unknown command (Click default)
    3  NOT_FOUND   -- `locate` found no declaration for the word
    4  UNREADABLE  -- source file or a search directory could not be read
    5  BAD_CONFIG  -- .mscan.json (or $MSCAN_CONFIG) is missing or invalid
"""

from __future__ import annotations

import sys

import click

EXIT_SUCCESS: int = 0
EXIT_ERROR: int = 1
EXIT_USAGE: int = 2
EXIT_NOT_FOUND: int = 3
EXIT_UNREADABLE: int = 4
EXIT_BAD_CONFIG: int = 5

DESCRIPTIONS: dict[int, str] = {
    EXIT_SUCCESS: "success",
    EXIT_ERROR: "unexpected error",
    EXIT_USAGE: "invalid usage (bad arguments or flags)",
    EXIT_NOT_FOUND: "symbol not found",
    EXIT_UNREADABLE: "file or directory could not be read",
    EXIT_BAD_CONFIG: "invalid configuration",
}


class MscanError(click.ClickException):
    """Base class for mscan errors with exit codes."""

    def __init__(self, message: str, exit_code: int = EXIT_ERROR):
        super().__init__(message)
        self.exit_code = exit_code

    def format_message(self) -> str:
        return self.message


class SymbolNotFoundError(MscanError):
    def __init__(self, word: str):
        super().__init__(f"No declaration found for '{word}'.", EXIT_NOT_FOUND)


class UnreadableSourceError(MscanError):
    """Raised when a source file or search directory cannot be read."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Cannot read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message, EXIT_UNREADABLE)


class ConfigError(MscanError):
    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}", EXIT_BAD_CONFIG)


def exit_with(code: int, message: str | None = None) -> None:
    """Print an optional message to stderr and exit with the given code."""
    if message:
        click.echo(f"Error: {message}", err=True)
    sys.exit(code)
