# src/ecssd/cli/start.py
"""
Start command for the ecssd CLI.

Runs discovery on a fixed interval until interrupted. Configuration errors
and publish failures stop the process with exit code 1.
"""

import asyncio
import logging
import signal
import traceback

import typer

from ..core.config import config
from ..core.exceptions import ConfigError, FatalError
from ..core.scheduler import Scheduler
from ..core.service import DiscoveryService
from .utils import build_service, configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(name="start", help="Start the periodic ECS target discovery service.")


async def _async_start(service: DiscoveryService, interval: int) -> None:
    if interval == 0:
        logger.info("SCRAPE_INTERVAL is 0; running discovery once.")
        await service.run_once()
        return

    scheduler = Scheduler()
    scheduler.add_job(service.run_once, interval)

    # Flag to signal graceful shutdown
    shutdown_requested = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            loop.add_signal_handler(sig, shutdown_requested.set)
        except NotImplementedError:
            logger.debug("Signal handlers are not supported on this platform.")

    waiter = asyncio.create_task(scheduler.wait())
    stopper = asyncio.create_task(shutdown_requested.wait())
    done, _ = await asyncio.wait({waiter, stopper}, return_when=asyncio.FIRST_COMPLETED)
    stopper.cancel()

    if waiter in done:
        # Only a fatal error ends the scheduler on its own.
        waiter.result()
        return

    logger.info("Received shutdown signal, stopping discovery...")
    waiter.cancel()
    await asyncio.gather(waiter, return_exceptions=True)
    await scheduler.stop()


@app.callback(invoke_without_command=True)
def start(ctx: typer.Context) -> None:
    """
    Validate the configuration and start the discovery loop.
    """
    if ctx.invoked_subcommand is not None:
        return

    configure_logging()

    try:
        config.validate_instance()
        interval = config.SCRAPE_INTERVAL
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    logger.info(
        "Starting ECS discovery for cluster '%s' every %ss, writing to %s",
        config.ECS_CLUSTER,
        interval,
        config.OUTPUT_FILE,
    )

    try:
        service = build_service()
        asyncio.run(_async_start(service, interval))
    except FatalError as e:
        logger.error(f"Fatal error, exiting: {e}")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        logger.info("Shutting down ECS discovery.")
        raise typer.Exit()
    except Exception as e:
        logger.error(f"An unexpected error occurred during startup: {e}")
        logger.error("Startup failed: %s", traceback.format_exc())
        raise typer.Exit(code=1)

    logger.info("ECS discovery stopped.")
