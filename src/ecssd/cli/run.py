# src/ecssd/cli/run.py
"""
Run command for the ecssd CLI: a single discovery pass.
"""

import asyncio
import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import ConfigError, FatalError
from .utils import build_service, configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(name="run", help="Discover targets once and publish them.")


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Path to write the file_sd document to (overrides ECS_SD_OUTPUT_FILE)."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the document instead of writing it."),
    ] = False,
) -> None:
    """
    Discover the cluster's scrape targets once.
    """
    if ctx.invoked_subcommand is not None:
        return

    configure_logging()

    try:
        config.validate_instance()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    try:
        service = build_service(output)
    except Exception as e:
        logger.error(f"Failed to initialize discovery: {e}")
        raise typer.Exit(code=1)

    try:
        if dry_run:
            records = asyncio.run(service.discover())
        else:
            records = asyncio.run(service.run_once())
    except FatalError as e:
        logger.error(f"Fatal error, exiting: {e}")
        raise typer.Exit(code=1)

    if records is None:
        typer.echo("Discovery aborted; no file written.", err=True)
        raise typer.Exit(code=1)

    if dry_run:
        typer.echo(service.exporter.render(records), nl=False)
    else:
        typer.echo(f"Wrote {len(records)} targets to {service.output_path}")
