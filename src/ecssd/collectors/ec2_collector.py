# src/ecssd/collectors/ec2_collector.py

import logging
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..models.ecs import ComputeInstance
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class Ec2Collector(BaseCollector):
    """Looks up the EC2 metadata behind an ECS container instance."""

    def get_instance_detail(self, instance: ComputeInstance) -> Optional[ComputeInstance]:
        """
        Returns a copy of `instance` enriched with its private IP, instance
        type, subnet and VPC, or None when the EC2 instance cannot be found.

        More than one match is unexpected; it is logged and the first one is used.
        """
        instance_id = instance.ec2_instance_id
        try:
            response = self._client.describe_instances(InstanceIds=[instance_id])
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to describe EC2 instance '%s': %s", instance_id, e)
            return None

        found = [i for reservation in response.get("Reservations", []) for i in reservation.get("Instances", [])]
        if not found:
            logger.error("Cannot find EC2 instance '%s'", instance_id)
            return None
        if len(found) != 1:
            logger.warning("Expected 1 instance for '%s' but found %d", instance_id, len(found))

        raw = found[0]
        return instance.model_copy(
            update={
                "private_ip": raw.get("PrivateIpAddress"),
                "instance_type": raw.get("InstanceType"),
                "subnet_id": raw.get("SubnetId"),
                "vpc_id": raw.get("VpcId"),
            }
        )
