# src/ecssd/resolvers/address_resolver.py

import logging

from ..models.ecs import ComputeInstance, Container, NetworkMode
from ..models.outcome import Outcome

logger = logging.getLogger(__name__)


def resolve_address(
    network_mode: NetworkMode, container: Container, instance: ComputeInstance, port: str
) -> Outcome[str]:
    """
    Builds the `ip:port` target for a container.

    awsvpc tasks are scraped on the container's own ENI address; every other
    mode shares the host network, so the host's private IP is used.
    """
    if network_mode.is_dedicated:
        ip = container.private_ipv4_address
        source = "network interface"
    else:
        ip = instance.private_ip
        source = f"instance '{instance.ec2_instance_id}'"

    if not ip:
        logger.warning("No private IP on the %s for container '%s'; skipping.", source, container.name)
        return Outcome.skip(f"no private IP on the {source}")

    return Outcome.ok(f"{ip}:{port}")
