"""Exporters package for file_sd outputs."""

from .base_exporter import BaseExporter
from .json_exporter import JSONExporter
from .yaml_exporter import YAMLExporter

__all__ = ["BaseExporter", "JSONExporter", "YAMLExporter", "get_exporter"]


def get_exporter(output_format: str) -> BaseExporter:
    if output_format == "json":
        return JSONExporter()
    if output_format == "yaml":
        return YAMLExporter()
    raise ValueError(f"Unsupported output format '{output_format}'")
