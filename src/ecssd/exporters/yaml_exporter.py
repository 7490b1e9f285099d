import io
from typing import Any, Dict, List

from ruamel.yaml import YAML

from .base_exporter import BaseExporter


class YAMLExporter(BaseExporter):
    DEFAULT_FILENAME = "ecs_file_sd.yml"

    def serialize(self, data: List[Dict[str, Any]]) -> str:
        yaml = YAML()
        yaml.default_flow_style = False
        stream = io.StringIO()
        yaml.dump(data, stream)
        return stream.getvalue()
