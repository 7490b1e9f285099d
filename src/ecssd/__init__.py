"""Prometheus file-based service discovery for AWS ECS."""

__version__ = "0.3.0"
