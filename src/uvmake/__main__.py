from uvmake.cli import cli

cli()
