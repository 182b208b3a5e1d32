"""Click CLI entry point with lazy-loaded subcommands."""

import logging
import os
import sys

# Fix Unicode output on Windows consoles (cp1253, cp1252, etc.)
if sys.platform == "win32" and not os.environ.get("PYTHONIOENCODING"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

import click


# Lazy-loading command group: imports command modules only when invoked.
_COMMANDS = {
    "paths":       ("mscan.commands.cmd_paths",       "paths"),
    "tokens":      ("mscan.commands.cmd_tokens",      "tokens"),
    "candidates":  ("mscan.commands.cmd_candidates",  "candidates"),
    "locate":      ("mscan.commands.cmd_locate",      "locate_cmd"),
    "occurrences": ("mscan.commands.cmd_occurrences", "occurrences"),
    "structs":     ("mscan.commands.cmd_structs",     "structs"),
    "calls":       ("mscan.commands.cmd_calls",       "calls"),
    "symbols":     ("mscan.commands.cmd_symbols",     "symbols"),
}

# Command categories for organized --help display
_CATEGORIES = {
    "Completion": ["candidates", "tokens", "paths", "structs"],
    "Navigation": ["locate", "occurrences", "calls", "symbols"],
}


class LazyGroup(click.Group):
    """A Click group that lazy-loads command modules on first access."""

    def list_commands(self, ctx):
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx, cmd_name):
        if cmd_name not in _COMMANDS:
            return None
        module_path, attr_name = _COMMANDS[cmd_name]
        import importlib
        mod = importlib.import_module(module_path)
        return getattr(mod, attr_name)

    def format_help(self, ctx, formatter):
        """Categorized help display instead of flat alphabetical list."""
        self.format_usage(ctx, formatter)
        formatter.write("\n")
        if self.help:
            formatter.write(self.help + "\n\n")

        click.Command.format_options(self, ctx, formatter)
        formatter.write("\n")

        for cat_name, cmds in _CATEGORIES.items():
            formatter.write(f"  {cat_name}:\n")
            for cmd_name in cmds:
                cmd = self.get_command(ctx, cmd_name)
                if cmd is None:
                    continue
                help_text = cmd.get_short_help_str(limit=60)
                formatter.write(f"    {cmd_name:14s} {help_text}\n")
            formatter.write("\n")

        formatter.write("  Run `mscan <command> --help` for details on any command.\n")


@click.group(cls=LazyGroup)
@click.version_option(package_name="mscan")
@click.option('--json', 'json_mode', is_flag=True, help='Output in JSON format')
@click.option('-v', '--verbose', is_flag=True, help='Log scanner activity to stderr')
@click.pass_context
def cli(ctx, json_mode, verbose):
    """mscan: symbol scanner for MATLAB-style source files."""
    ctx.ensure_object(dict)
    ctx.obj['json'] = json_mode
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
