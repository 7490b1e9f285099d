# src/ecssd/cli/main.py
"""
Entry point for the ecssd CLI: `version`, `start` and `run`.
"""

import typer

from .. import __version__
from . import run, start

app = typer.Typer(
    name="ecssd",
    help="Publish Prometheus file_sd targets for containers running on AWS ECS.",
    add_completion=False,
)


@app.command()
def version():
    """Show the version of ecssd."""
    typer.echo(f"ecssd version: {__version__}")


app.add_typer(start.app, name="start")
app.add_typer(run.app, name="run")


if __name__ == "__main__":
    app()
