from uncss.cli.main import cli

cli(prog_name="uncss")
