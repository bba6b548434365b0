"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdrename.cli.commands import check_cmd, plan_cmd, rename_cmd


app = typer.Typer(name="mdrename", no_args_is_help=True, help="Canonicalize proposal document filenames")

app.command(name="rename")(rename_cmd)
app.command(name="check")(check_cmd)
app.command(name="plan")(plan_cmd)
