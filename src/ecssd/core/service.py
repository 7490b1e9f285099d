# src/ecssd/core/service.py
"""
One discovery tick: assemble the targets for the cluster, then publish them.
"""

import asyncio
import logging
from typing import List, Optional

from ..exporters.base_exporter import BaseExporter
from ..models.targets import TargetRecord
from .assembler import TargetAssembler

logger = logging.getLogger(__name__)


class DiscoveryService:
    """Runs the assembler and hands its output to the exporter."""

    def __init__(self, cluster: str, assembler: TargetAssembler, exporter: BaseExporter, output_path: str):
        self.cluster = cluster
        self.assembler = assembler
        self.exporter = exporter
        self.output_path = output_path

    async def discover(self) -> Optional[List[TargetRecord]]:
        """Returns the records for this tick, or None if the run was aborted."""
        # The boto3 calls are blocking; keep them off the event loop.
        outcome = await asyncio.to_thread(self.assembler.assemble, self.cluster)
        if not outcome.is_ok:
            logger.error("Discovery run aborted for cluster '%s': %s", self.cluster, outcome.reason)
            return None
        return outcome.value

    async def run_once(self) -> Optional[List[TargetRecord]]:
        """
        Discovers and publishes once. An aborted run leaves the previous file
        in place; a PublishError propagates to the caller.
        """
        logger.info("--- Starting discovery for cluster '%s' ---", self.cluster)
        records = await self.discover()
        if records is None:
            return None

        await self.exporter.export(records, self.output_path)
        logger.info("--- Finished discovery for cluster '%s' ---", self.cluster)
        return records
