# src/ecssd/models/outcome.py
"""
Outcome type shared by the collectors, resolvers and the assembler.

Each loop level in the assembler inspects the status and decides whether to
keep the value, skip the item or abandon the current run. Failures that must
stop the process are not outcomes: they are raised as FatalError
(see core/exceptions.py) and propagate out of the scheduler.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    SKIP = "skip"
    ABORT_RUN = "abort_run"


class Outcome(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: OutcomeStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(status=OutcomeStatus.SUCCESS, value=value)

    @classmethod
    def skip(cls, reason: str) -> "Outcome[T]":
        return cls(status=OutcomeStatus.SKIP, reason=reason)

    @classmethod
    def abort(cls, reason: str) -> "Outcome[T]":
        return cls(status=OutcomeStatus.ABORT_RUN, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS
