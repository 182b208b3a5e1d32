"""``function`` header lines: name, inputs and outputs of each declaration."""

from __future__ import annotations

import re

from mscan.models import FunctionDeclaration

_RE_FUNC = re.compile(
    r"^\s*function\s+"
    r"(?:(?:\[(?P<multi>[^\]]*)\]|(?P<single>\w+))\s*=\s*)?"
    r"(?P<name>[A-Za-z_][\w.]*)"
    r"\s*(?:\((?P<params>[^)]*)\))?"
)


def _names(text: str | None) -> tuple[str, ...]:
    if not text:
        return ()
    return tuple(p for p in re.split(r"[\s,]+", text.strip()) if p)


def find_function_declarations(content: str) -> list[FunctionDeclaration]:
    """All function headers in *content*, in file order (row is zero-based)."""
    decls: list[FunctionDeclaration] = []
    for i, line in enumerate(content.split("\n")):
        m = _RE_FUNC.match(line)
        if not m:
            continue
        decls.append(
            FunctionDeclaration(
                name=m.group("name"),
                row=i,
                params=_names(m.group("params")),
                returns=_names(m.group("multi") or m.group("single")),
            )
        )
    return decls
