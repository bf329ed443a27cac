"""CLI entrypoint: Typer app definition and command registration"""

import typer

from notemigrate.cli.commands import migrate_cmd, scan_cmd


app = typer.Typer(name="notemigrate", no_args_is_help=True, help="Exported HTML notes -> posts + shared media")

app.command(name="migrate")(migrate_cmd)
app.command(name="scan")(scan_cmd)
