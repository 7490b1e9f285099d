# src/ecssd/resolvers/endpoint_resolver.py
"""
Decides whether a container opted in to scraping, based on the docker
labels of its container definition.
"""

import logging
from typing import Optional

from ..models.ecs import WorkloadTemplate
from ..models.outcome import Outcome
from ..models.targets import DEFAULT_METRICS_PATH, DEFAULT_METRICS_SCHEME, ScrapeConfig

logger = logging.getLogger(__name__)


class EndpointResolver:
    """
    Maps a container name to a ScrapeConfig using the label keys it was built with.
    """

    def __init__(
        self,
        port_label: str = "PROMETHEUS_SCRAPE_PORT",
        path_label: str = "PROMETHEUS_METRICS_PATH",
        scheme_label: str = "PROMETHEUS_METRICS_SCHEME",
    ):
        self.port_label = port_label
        self.path_label = path_label
        self.scheme_label = scheme_label

    def resolve(self, container_name: str, template: WorkloadTemplate) -> Outcome[ScrapeConfig]:
        """
        Returns the scrape settings for `container_name`, or a skip when the
        container has no definition in the template or did not opt in.
        """
        definition = template.find_container(container_name)
        if definition is None:
            logger.warning(
                "Unable to find container '%s' in task definition '%s'",
                container_name,
                template.arn,
            )
            return Outcome.skip(f"container '{container_name}' missing from task definition")

        labels = definition.docker_labels
        port: Optional[str] = labels.get(self.port_label)
        if port is None:
            logger.info("Container '%s' has no %s docker label; skipping.", container_name, self.port_label)
            return Outcome.skip("not opted in")

        return Outcome.ok(
            ScrapeConfig(
                port=port,
                path=labels.get(self.path_label, DEFAULT_METRICS_PATH),
                scheme=labels.get(self.scheme_label, DEFAULT_METRICS_SCHEME),
            )
        )
