import logging
from typing import Optional

from ..core.config import config
from ..core.factory import get_assembler, get_configured_exporter
from ..core.service import DiscoveryService


def configure_logging() -> None:
    """Configures root logging, tagging every line with the cluster being discovered."""
    cluster = config.ECS_CLUSTER or "-"
    # An unknown LOG_LEVEL is reported by validate_instance; log at INFO until then.
    level = config.LOG_LEVEL if config.LOG_LEVEL_IS_VALID else "INFO"
    logging.basicConfig(
        level=level,
        format=f"%(asctime)s - %(levelname)s - cluster={cluster} - %(message)s",
        force=True,
    )


def build_service(output: Optional[str] = None) -> DiscoveryService:
    """Wires a DiscoveryService from the current configuration. Assumes it was validated."""
    output_path = output or config.OUTPUT_FILE
    return DiscoveryService(
        cluster=config.ECS_CLUSTER,
        assembler=get_assembler(),
        exporter=get_configured_exporter(output_path),
        output_path=output_path,
    )
