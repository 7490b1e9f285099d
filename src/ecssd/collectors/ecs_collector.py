# src/ecssd/collectors/ecs_collector.py
"""
Reads container instances, running tasks and task definitions from the
ECS API.
"""

import logging
from typing import List

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from ..models.ecs import ComputeInstance, Container, ContainerDefinition, Workload, WorkloadTemplate
from ..models.outcome import Outcome
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class EcsCollector(BaseCollector):
    """
    Walks the ECS hierarchy: cluster -> container instance -> task.
    """

    def list_instances(self, cluster: str) -> Outcome[List[ComputeInstance]]:
        """
        Lists then describes every container instance in the cluster.

        An empty cluster is a successful, empty result. Any API failure
        aborts the current run.
        """
        try:
            arns = self.paginate("list_container_instances", "containerInstanceArns", cluster=cluster)
            if not arns:
                logger.info("There were no container instances in cluster '%s'.", cluster)
                return Outcome.ok([])

            instances: List[ComputeInstance] = []
            for batch in self.batched(arns):
                response = self._client.describe_container_instances(cluster=cluster, containerInstances=batch)
                self.log_failures("DescribeContainerInstances", response)
                for raw in response.get("containerInstances", []):
                    instances.append(
                        ComputeInstance(
                            instance_arn=raw["containerInstanceArn"],
                            ec2_instance_id=raw["ec2InstanceId"],
                        )
                    )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to list container instances for cluster '%s': %s", cluster, e)
            return Outcome.abort(f"container instance lookup failed: {e}")
        except (KeyError, ValidationError) as e:
            logger.error("Unexpected container instance description for cluster '%s': %s", cluster, e)
            return Outcome.abort(f"malformed container instance description: {e}")

        logger.info("Found %d container instances", len(instances))
        return Outcome.ok(instances)

    def list_workloads(self, cluster: str, instance: ComputeInstance) -> Outcome[List[Workload]]:
        """
        Lists then describes the tasks running on one container instance.

        Failures only skip this instance.
        """
        try:
            arns = self.paginate(
                "list_tasks", "taskArns", cluster=cluster, containerInstance=instance.instance_arn
            )
            if not arns:
                logger.info("There were no tasks on the instance '%s'.", instance.instance_arn)
                return Outcome.ok([])

            workloads: List[Workload] = []
            for batch in self.batched(arns):
                response = self._client.describe_tasks(cluster=cluster, tasks=batch)
                self.log_failures("DescribeTasks", response)
                for raw in response.get("tasks", []):
                    workloads.append(self._to_workload(raw))
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to list tasks on instance '%s': %s", instance.instance_arn, e)
            return Outcome.skip(f"task lookup failed: {e}")
        except (KeyError, ValidationError) as e:
            logger.error("Unexpected task description on instance '%s': %s", instance.instance_arn, e)
            return Outcome.skip(f"malformed task description: {e}")

        logger.info("Found %d tasks", len(workloads))
        return Outcome.ok(workloads)

    def get_template(self, task_definition_arn: str) -> Outcome[WorkloadTemplate]:
        """Resolves a task definition. Failures only skip the task that referenced it."""
        try:
            response = self._client.describe_task_definition(taskDefinition=task_definition_arn)
            raw = response["taskDefinition"]
            template = WorkloadTemplate(
                arn=raw.get("taskDefinitionArn", task_definition_arn),
                family=raw["family"],
                revision=raw["revision"],
                network_mode=raw.get("networkMode") or "bridge",
                container_definitions=[
                    ContainerDefinition(name=c["name"], docker_labels=c.get("dockerLabels") or {})
                    for c in raw.get("containerDefinitions", [])
                ],
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to describe task definition '%s': %s", task_definition_arn, e)
            return Outcome.skip(f"task definition lookup failed: {e}")
        except (KeyError, ValidationError) as e:
            logger.error("Unexpected task definition '%s': %s", task_definition_arn, e)
            return Outcome.skip(f"malformed task definition: {e}")

        return Outcome.ok(template)

    @staticmethod
    def _to_workload(raw: dict) -> Workload:
        containers = []
        for c in raw.get("containers", []):
            interfaces = c.get("networkInterfaces") or []
            containers.append(
                Container(
                    name=c["name"],
                    runtime_id=c.get("runtimeId"),
                    image=c.get("image"),
                    private_ipv4_address=interfaces[0].get("privateIpv4Address") if interfaces else None,
                )
            )
        return Workload(
            task_arn=raw["taskArn"],
            task_definition_arn=raw["taskDefinitionArn"],
            containers=containers,
        )
