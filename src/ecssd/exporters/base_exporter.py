from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

import aiofiles
import aiofiles.os

from ..core.exceptions import PublishError
from ..models.targets import TargetRecord

logger = logging.getLogger(__name__)


class BaseExporter(ABC):
    """Abstract base class for file_sd exporters.

    Subclasses provide a DEFAULT_FILENAME and implement `serialize`. The
    write itself goes to a temporary file next to the target which then
    replaces it, so Prometheus never reads a half-written document.
    """

    DEFAULT_FILENAME: str = "ecs_file_sd"

    @abstractmethod
    def serialize(self, data: List[Dict[str, Any]]) -> str:
        raise NotImplementedError()

    def render(self, records: Sequence[TargetRecord]) -> str:
        try:
            return self.serialize([record.to_file_sd() for record in records])
        except Exception as e:
            raise PublishError(f"Unable to serialize {len(records)} targets: {e}") from e

    async def export(self, records: Sequence[TargetRecord], path: str | None = None) -> str:
        """Replace the file at `path` with the serialized records. Return the written path."""
        out_path = path or self.DEFAULT_FILENAME
        content = self.render(records)
        tmp_path = f"{out_path}.tmp"

        try:
            # Ensure parent directory exists
            os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as fh:
                await fh.write(content)
            await aiofiles.os.replace(tmp_path, out_path)
        except OSError as e:
            try:
                os.unlink(tmp_path)
            except OSError:
                logger.debug("No temporary file to remove at %s", tmp_path)
            raise PublishError(f"Unable to write targets to '{out_path}': {e}") from e

        logger.info("Wrote %d targets to %s", len(records), out_path)
        return out_path
