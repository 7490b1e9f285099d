import logging
from typing import Any, NamedTuple, Optional

import boto3
from botocore.config import Config as BotoConfig

from .config import config

logger = logging.getLogger(__name__)


class AwsClients(NamedTuple):
    """ECS and EC2 clients shared by every discovery run of the process."""

    ecs: Any
    ec2: Any


def create_aws_clients(region_name: Optional[str] = None, max_attempts: Optional[int] = None) -> AwsClients:
    """
    Builds the boto3 ECS and EC2 clients from a single session.

    Credentials come from the standard boto3 chain (env vars, shared
    config, instance/task role).
    """
    region_name = region_name or config.AWS_REGION
    max_attempts = max_attempts or config.AWS_MAX_ATTEMPTS

    session = boto3.session.Session(region_name=region_name)
    boto_config = BotoConfig(retries={"max_attempts": max_attempts, "mode": "standard"})

    logger.info("Creating AWS clients (region=%s, max_attempts=%s).", session.region_name, max_attempts)
    return AwsClients(
        ecs=session.client("ecs", config=boto_config),
        ec2=session.client("ec2", config=boto_config),
    )
