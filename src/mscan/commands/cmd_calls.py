"""Multi-return call sites."""

from __future__ import annotations

import click

from mscan.analysis.calls import extract_multi_return_calls
from mscan.commands.resolve import emit_json, json_mode, load_source
from mscan.output.formatter import format_table


@click.command("calls")
@click.argument("file")
@click.pass_context
def calls(ctx, file):
    """List ``[a, b] = f(x, y)`` calls in FILE."""
    content, _ = load_source(file)
    found = extract_multi_return_calls(content)

    if json_mode(ctx):
        emit_json("calls", file, {"count": len(found)}, calls=[c.to_dict() for c in found])
        return

    rows = [[c.name, ", ".join(c.params), ", ".join(c.returns)] for c in found]
    click.echo(format_table(["name", "params", "returns"], rows))
