# src/ecssd/core/assembler.py
import logging
from typing import Dict, List, Optional

from ..collectors.ec2_collector import Ec2Collector
from ..collectors.ecs_collector import EcsCollector
from ..models.ecs import ComputeInstance, Container, Workload, WorkloadTemplate
from ..models.outcome import Outcome
from ..models.targets import TargetLabels, TargetRecord
from ..resolvers.address_resolver import resolve_address
from ..resolvers.endpoint_resolver import EndpointResolver

logger = logging.getLogger(__name__)


class TargetAssembler:
    """Joins ECS, EC2 and docker label data into file_sd target records."""

    def __init__(
        self,
        ecs_collector: EcsCollector,
        ec2_collector: Ec2Collector,
        endpoint_resolver: EndpointResolver,
    ):
        self.ecs_collector = ecs_collector
        self.ec2_collector = ec2_collector
        self.endpoint_resolver = endpoint_resolver

    def assemble(self, cluster: str) -> Outcome[List[TargetRecord]]:
        """
        Runs one discovery pass over the cluster.

        Returns an abort outcome only when the container instances themselves
        cannot be listed; every other failure drops the affected instance,
        task or container and the pass continues.
        """
        instances = self.ecs_collector.list_instances(cluster)
        if not instances.is_ok:
            logger.error("Unable to get the container instances for the cluster: %s", instances.reason)
            return Outcome.abort(instances.reason or "container instance lookup failed")

        # Task definitions are shared by many tasks; look each one up once per pass.
        templates: Dict[str, Outcome[WorkloadTemplate]] = {}
        records: List[TargetRecord] = []
        skipped = 0

        for instance in instances.value:
            workloads = self.ecs_collector.list_workloads(cluster, instance)
            if not workloads.is_ok:
                logger.warning("Skipping instance '%s': %s", instance.instance_arn, workloads.reason)
                continue
            if not workloads.value:
                continue

            detail = self.ec2_collector.get_instance_detail(instance)
            if detail is None:
                logger.warning("Skipping instance '%s': no EC2 details available", instance.instance_arn)
                continue

            for workload in workloads.value:
                template = templates.get(workload.task_definition_arn)
                if template is None:
                    template = self.ecs_collector.get_template(workload.task_definition_arn)
                    templates[workload.task_definition_arn] = template
                if not template.is_ok:
                    logger.warning("Skipping task '%s': %s", workload.task_arn, template.reason)
                    continue

                for container in workload.containers:
                    record = self._build_record(cluster, container, workload, template.value, detail)
                    if record is None:
                        skipped += 1
                        continue
                    records.append(record)

        logger.info("Discovered %d targets (%d containers skipped)", len(records), skipped)
        return Outcome.ok(records)

    def _build_record(
        self,
        cluster: str,
        container: Container,
        workload: Workload,
        template: WorkloadTemplate,
        instance: ComputeInstance,
    ) -> Optional[TargetRecord]:
        scrape = self.endpoint_resolver.resolve(container.name, template)
        if not scrape.is_ok:
            return None

        address = resolve_address(template.network_mode, container, instance, scrape.value.port)
        if not address.is_ok:
            return None

        logger.debug("Task '%s' container '%s' -> %s", workload.task_arn, container.name, address.value)
        return TargetRecord(
            targets=[address.value],
            labels=TargetLabels(
                container_name=container.name,
                container_id=container.runtime_id or "",
                container_image=container.image or "",
                task_definition_family=template.family,
                task_revision=template.revision,
                instance_type=instance.instance_type or "",
                subnet_id=instance.subnet_id or "",
                vpc_id=instance.vpc_id or "",
                cluster_arn=cluster,
                metrics_path=scrape.value.path,
                scheme=scrape.value.scheme,
            ),
        )
