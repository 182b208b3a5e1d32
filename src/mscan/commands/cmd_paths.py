"""Show addpath directives and the directories they add to the search list."""

from __future__ import annotations

import click

from mscan.analysis.candidates import search_directories
from mscan.analysis.paths import resolve_added_paths
from mscan.commands.resolve import emit_json, json_mode, load_source
from mscan.output.formatter import format_table


@click.command("paths")
@click.argument("file")
@click.pass_context
def paths(ctx, file):
    """List addpath directives and resolved search directories."""
    content, dialect = load_source(file)
    added = resolve_added_paths(content, comment=dialect.comment)
    dirs = search_directories(file, content, dialect)

    if json_mode(ctx):
        emit_json(
            "paths",
            file,
            {"added": len(added), "directories": len(dirs)},
            added=added,
            directories=dirs,
        )
        return

    # dirs[0] is the file's own directory
    rows = [[entry, resolved] for entry, resolved in zip(added, dirs[1:])]
    click.echo(f"Search root: {dirs[0]}")
    click.echo(format_table(["addpath", "resolved"], rows))
