"""Struct-like names and their members."""

from __future__ import annotations

import click

from mscan.analysis.structs import build_completions, find_members
from mscan.commands.resolve import emit_json, json_mode, load_source
from mscan.models import StructCompletion


@click.command("structs")
@click.argument("file")
@click.option("-s", "--struct", "struct_name", default=None, help="Only show members of this struct")
@click.pass_context
def structs(ctx, file, struct_name):
    """List dotted-access names in FILE and the members used on each."""
    content, dialect = load_source(file)
    if struct_name:
        completions = [StructCompletion(struct_name, tuple(find_members(content, struct_name)))]
    else:
        completions = build_completions(file, content, dialect.extension)

    if json_mode(ctx):
        emit_json(
            "structs",
            file,
            {"structs": len(completions), "members": sum(len(c.members) for c in completions)},
            structs=[c.to_dict() for c in completions],
        )
        return

    if not completions:
        click.echo("(none)")
        return
    for c in completions:
        click.echo(f"{c.name}: {', '.join(c.members) if c.members else '-'}")
