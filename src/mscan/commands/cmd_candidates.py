"""Completion candidates for a file."""

from __future__ import annotations

import click

from mscan.analysis.candidates import list_candidates
from mscan.commands.resolve import emit_json, json_mode, load_source
from mscan.exit_codes import UnreadableSourceError
from mscan.output.formatter import section


@click.command("candidates")
@click.argument("file")
@click.option("-n", "count", default=0, type=click.IntRange(min=0), help="Max candidates to show (0 = all)")
@click.pass_context
def candidates(ctx, file, count):
    """Source files on the search path plus identifiers in FILE."""
    content, dialect = load_source(file)
    try:
        names = list_candidates(file, content, dialect)
    except OSError as exc:
        raise UnreadableSourceError(exc.filename or file, exc.strerror or str(exc)) from exc

    if json_mode(ctx):
        shown = names[:count] if count else names
        emit_json("candidates", file, {"count": len(names), "shown": len(shown)}, candidates=shown)
        return

    click.echo(section(f"Candidates ({len(names)}):", [f"  {n}" for n in names], budget=count))
