"""CLI entry point for funcpipe."""

import typer

from funcpipe.config import FuncpipeSettings, configure_logging

from .pipeline import plan, run

app = typer.Typer(help="Run sequences of operations and their arguments.")


@app.callback()
def main() -> None:
    configure_logging(FuncpipeSettings())


app.command(name="run")(run)
app.command(name="plan")(plan)
