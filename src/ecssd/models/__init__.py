from .ecs import ComputeInstance, Container, ContainerDefinition, NetworkMode, Workload, WorkloadTemplate
from .outcome import Outcome, OutcomeStatus
from .targets import ScrapeConfig, TargetLabels, TargetRecord

__all__ = [
    "ComputeInstance",
    "Container",
    "ContainerDefinition",
    "NetworkMode",
    "Outcome",
    "OutcomeStatus",
    "ScrapeConfig",
    "TargetLabels",
    "TargetRecord",
    "Workload",
    "WorkloadTemplate",
]
