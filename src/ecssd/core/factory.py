# src/ecssd/core/factory.py
"""
Factory functions wiring the AWS clients, collectors and resolvers into a
TargetAssembler.
"""

import logging
from functools import lru_cache

from ..collectors.ec2_collector import Ec2Collector
from ..collectors.ecs_collector import EcsCollector
from ..exporters import BaseExporter, get_exporter
from ..resolvers.endpoint_resolver import EndpointResolver
from .assembler import TargetAssembler
from .aws_client import AwsClients, create_aws_clients
from .config import config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_aws_clients() -> AwsClients:
    """
    Process-wide AWS clients, created on first use.
    Uses lru_cache to act as a singleton.
    """
    return create_aws_clients()


def build_assembler(clients: AwsClients) -> TargetAssembler:
    return TargetAssembler(
        ecs_collector=EcsCollector(clients.ecs),
        ec2_collector=Ec2Collector(clients.ec2),
        endpoint_resolver=EndpointResolver(
            port_label=config.SCRAPE_PORT_LABEL,
            path_label=config.METRICS_PATH_LABEL,
            scheme_label=config.METRICS_SCHEME_LABEL,
        ),
    )


def get_assembler() -> TargetAssembler:
    logger.info("Initializing collectors and target assembler...")
    return build_assembler(get_aws_clients())


def get_configured_exporter(path: str) -> BaseExporter:
    """Picks the serializer for `path`, honouring an explicit ECS_SD_OUTPUT_FORMAT."""
    return get_exporter(config.output_format_for(path))
