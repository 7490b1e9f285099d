# src/ecssd/models/targets.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_METRICS_PATH = "/metrics"
DEFAULT_METRICS_SCHEME = "http"


class ScrapeConfig(BaseModel):
    """
    Scrape settings read from a container definition's docker labels.

    Attributes:
        port: Value of the scrape-port label, used verbatim
        path: Metrics path, defaults to '/metrics'
        scheme: Metrics scheme, defaults to 'http'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    port: str = Field(..., description="Port to scrape")
    path: str = Field(DEFAULT_METRICS_PATH, description="Metrics path")
    scheme: str = Field(DEFAULT_METRICS_SCHEME, description="Metrics scheme")


class TargetLabels(BaseModel):
    """Labels attached to a file_sd target, dumped under their Prometheus names."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    container_name: str = Field(..., alias="ContainerName")
    container_id: str = Field("", alias="ContainerId")
    container_image: str = Field("", alias="ContainerImage")
    task_definition_family: str = Field(..., alias="TaskDefinitionFamily")
    task_revision: int = Field(..., alias="TaskRevision")
    instance_type: str = Field("", alias="InstanceType")
    subnet_id: str = Field("", alias="SubnetId")
    vpc_id: str = Field("", alias="VpcId")
    cluster_arn: str = Field(..., alias="ClusterArn")
    metrics_path: str = Field(DEFAULT_METRICS_PATH, alias="__metrics_path__")
    scheme: str = Field(DEFAULT_METRICS_SCHEME, alias="__scheme__")


class TargetRecord(BaseModel):
    """One entry of a Prometheus file_sd document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    targets: List[str]
    labels: TargetLabels

    def to_file_sd(self) -> dict:
        return self.model_dump(by_alias=True)
