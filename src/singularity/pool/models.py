"""Jobs, tasks and their outcomes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TaskStatus(str, Enum):
    """Task outcome states. A task leaves PENDING exactly once."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class Job:
    """One independent, argument-free unit of build work.

    The operation carries its inputs explicitly (usually through
    ``functools.partial``) so a job never depends on loop variables, other
    jobs or execution order. Returning normally is success; raising is
    failure.
    """

    operation: Callable[[], object]
    name: str = ""
    kind: str = "job"
    output: Path | None = None

    def __call__(self) -> None:
        self.operation()

    def describe(self) -> str:
        return f"{self.kind} {self.name}".strip()


@dataclass(slots=True, eq=False)
class Task:
    """A job plus the recorded outcome of running it."""

    job: Job
    status: TaskStatus = TaskStatus.PENDING
    error: BaseException | None = None
    error_summary: str | None = None
    duration_seconds: float | None = None

    @property
    def done(self) -> bool:
        return self.status is not TaskStatus.PENDING

    @property
    def failed(self) -> bool:
        return self.status is TaskStatus.FAILED

    def mark_succeeded(self, *, duration_seconds: float) -> None:
        self._ensure_pending()
        self.duration_seconds = duration_seconds
        self.status = TaskStatus.SUCCEEDED

    def mark_failed(
        self,
        error: BaseException,
        *,
        duration_seconds: float,
        summary: str | None = None,
    ) -> None:
        self._ensure_pending()
        self.error = error
        self.error_summary = summary or f"{self.job.describe()}: {error}"
        self.duration_seconds = duration_seconds
        self.status = TaskStatus.FAILED

    def _ensure_pending(self) -> None:
        if self.done:
            raise RuntimeError(
                f"Outcome already recorded for {self.job.describe()!r}: {self.status.value}",
            )
