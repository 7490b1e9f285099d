from .base_collector import BaseCollector
from .ec2_collector import Ec2Collector
from .ecs_collector import EcsCollector

__all__ = ["BaseCollector", "Ec2Collector", "EcsCollector"]
