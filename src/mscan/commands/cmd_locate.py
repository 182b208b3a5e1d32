"""Find where a word is declared."""

from __future__ import annotations

import click

from mscan.analysis.locate import locate
from mscan.commands.resolve import emit_json, json_mode, load_source
from mscan.exit_codes import EXIT_NOT_FOUND, SymbolNotFoundError, exit_with
from mscan.output.formatter import loc


@click.command("locate")
@click.argument("file")
@click.argument("word")
@click.pass_context
def locate_cmd(ctx, file, word):
    """Locate the declaration of WORD (assignment, then function header)."""
    content, _ = load_source(file)
    pos = locate(content, word)

    if json_mode(ctx):
        emit_json(
            "locate",
            file,
            {"found": pos is not None},
            word=word,
            position=pos.to_dict() if pos else None,
        )
        if pos is None:
            exit_with(EXIT_NOT_FOUND)
        return

    if pos is None:
        raise SymbolNotFoundError(word)
    click.echo(f"{word}  {loc(file, pos.row, pos.column)}")
