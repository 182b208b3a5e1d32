"""One-shot summary of everything the scanners find in a file."""

from __future__ import annotations

import click

from mscan.api import summarize
from mscan.commands.resolve import emit_json, json_mode, load_source
from mscan.output.formatter import format_table, section


@click.command("symbols")
@click.argument("file")
@click.pass_context
def symbols(ctx, file):
    """Functions, structs, calls and addpath entries in FILE."""
    content, dialect = load_source(file)
    data = summarize(file, content, dialect)

    if json_mode(ctx):
        summary = {k: len(v) for k, v in data.items()}
        emit_json("symbols", file, summary, **data)
        return

    fn_rows = [
        [f["name"], str(f["row"] + 1), ", ".join(f["params"]), ", ".join(f["returns"])]
        for f in data["functions"]
    ]
    click.echo(section("Functions:", [format_table(["name", "line", "params", "returns"], fn_rows)]))
    struct_lines = [f"  {s['name']}: {', '.join(s['members']) or '-'}" for s in data["structs"]]
    click.echo(section(f"\nStructs ({len(struct_lines)}):", struct_lines))
    call_lines = [f"  [{', '.join(c['returns'])}] = {c['name']}({', '.join(c['params'])})" for c in data["calls"]]
    click.echo(section(f"\nCalls ({len(call_lines)}):", call_lines))
    click.echo(section(f"\naddpath ({len(data['paths'])}):", [f"  {p}" for p in data["paths"]]))
