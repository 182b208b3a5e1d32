"""Whole-word occurrences of a name."""

from __future__ import annotations

import click

from mscan.analysis.locate import find_occurrences
from mscan.commands.resolve import emit_json, json_mode, load_source
from mscan.output.formatter import format_table


@click.command("occurrences")
@click.argument("file")
@click.argument("name")
@click.pass_context
def occurrences(ctx, file, name):
    """List every row/column where NAME appears as a whole word."""
    content, _ = load_source(file)
    found = find_occurrences(content, name)

    if json_mode(ctx):
        emit_json(
            "occurrences",
            file,
            {"count": len(found)},
            name=name,
            occurrences=[p.to_dict() for p in found],
        )
        return

    lines = content.split("\n")
    rows = [[str(p.row + 1), str(p.column + 1), lines[p.row].strip()] for p in found]
    click.echo(format_table(["line", "col", "text"], rows))
