# src/ecssd/models/ecs.py

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NetworkMode(str, Enum):
    """ECS task networking modes. Only AWSVPC gives each task its own ENI."""

    BRIDGE = "bridge"
    HOST = "host"
    AWSVPC = "awsvpc"
    NONE = "none"

    @property
    def is_dedicated(self) -> bool:
        return self is NetworkMode.AWSVPC


class ComputeInstance(BaseModel):
    """
    Pydantic model for an ECS container instance and its EC2 metadata.

    The ECS fields are always present; the EC2 fields are filled in by
    `Ec2Collector.get_instance_detail` and stay None until then.

    Attributes:
        instance_arn: ECS container instance ARN
        ec2_instance_id: Underlying EC2 instance id
        private_ip: Primary private IPv4 address of the host
        instance_type: EC2 instance type (e.g., 'm5.large')
        subnet_id: Subnet the host lives in
        vpc_id: VPC the host lives in
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    instance_arn: str = Field(..., description="ECS container instance ARN")
    ec2_instance_id: str = Field(..., description="EC2 instance id")
    private_ip: Optional[str] = Field(None, description="Private IPv4 address")
    instance_type: Optional[str] = Field(None, description="EC2 instance type")
    subnet_id: Optional[str] = Field(None, description="Subnet id")
    vpc_id: Optional[str] = Field(None, description="VPC id")


class Container(BaseModel):
    """A running container inside an ECS task."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    runtime_id: Optional[str] = None
    image: Optional[str] = None
    # First ENI address, only populated for awsvpc tasks.
    private_ipv4_address: Optional[str] = None


class Workload(BaseModel):
    """A running ECS task."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    task_arn: str
    task_definition_arn: str
    containers: List[Container] = Field(default_factory=list)


class ContainerDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    docker_labels: Dict[str, str] = Field(default_factory=dict)


class WorkloadTemplate(BaseModel):
    """An ECS task definition, reduced to what target assembly needs."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    arn: str
    family: str
    revision: int
    network_mode: NetworkMode = NetworkMode.BRIDGE
    container_definitions: List[ContainerDefinition] = Field(default_factory=list)

    def find_container(self, name: str) -> Optional[ContainerDefinition]:
        for definition in self.container_definitions:
            if definition.name == name:
                return definition
        return None
