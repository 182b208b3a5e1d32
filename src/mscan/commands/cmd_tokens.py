"""List identifier tokens found in a file."""

from __future__ import annotations

import click

from mscan.analysis.tokens import extract_identifiers
from mscan.commands.resolve import emit_json, json_mode, load_source


@click.command("tokens")
@click.argument("file")
@click.pass_context
def tokens(ctx, file):
    """List distinct identifiers, reserved words excluded."""
    content, dialect = load_source(file)
    idents = extract_identifiers(content, dialect.keywords)

    if json_mode(ctx):
        emit_json("tokens", file, {"count": len(idents)}, tokens=idents)
        return

    for ident in idents:
        click.echo(ident)
