# src/ecssd/collectors/base_collector.py
"""
This module defines the base class shared by the AWS collectors.
Collectors wrap a boto3 client and never let botocore exceptions escape:
every public method returns an `Outcome` instead.
"""

import logging
from typing import Any, Iterator, List, Sequence

logger = logging.getLogger(__name__)

# DescribeContainerInstances and DescribeTasks accept at most 100 ARNs.
DESCRIBE_BATCH_SIZE = 100


class BaseCollector:
    """
    Base class for collectors backed by a single boto3 client.
    """

    def __init__(self, client: Any):
        self._client = client

    @staticmethod
    def batched(items: Sequence[str], size: int = DESCRIBE_BATCH_SIZE) -> Iterator[List[str]]:
        for start in range(0, len(items), size):
            yield list(items[start : start + size])

    def paginate(self, operation: str, result_key: str, **kwargs) -> List[Any]:
        """Collects `result_key` across every page of a paginated API call."""
        paginator = self._client.get_paginator(operation)
        results: List[Any] = []
        for page in paginator.paginate(**kwargs):
            results.extend(page.get(result_key, []))
        return results

    @staticmethod
    def log_failures(operation: str, response: dict) -> None:
        for failure in response.get("failures", []) or []:
            logger.warning(
                "%s reported a failure for '%s': %s",
                operation,
                failure.get("arn"),
                failure.get("reason"),
            )
