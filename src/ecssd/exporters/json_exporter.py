import json
from typing import Any, Dict, List

from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    DEFAULT_FILENAME = "ecs_file_sd.json"

    def serialize(self, data: List[Dict[str, Any]]) -> str:
        # Prometheus decodes JSON file_sd labels strictly as strings.
        rows = [
            {**row, "labels": {name: str(value) for name, value in row.get("labels", {}).items()}}
            for row in data
        ]
        return json.dumps(rows, ensure_ascii=False, indent=2) + "\n"
