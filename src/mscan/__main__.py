from mscan.cli import cli

cli()
