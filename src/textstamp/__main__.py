from textstamp.cli import cli

cli()
