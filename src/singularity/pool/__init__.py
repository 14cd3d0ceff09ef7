"""Bounded-concurrency task pool."""

from singularity.pool.models import Job, Task, TaskStatus
from singularity.pool.pool import DEFAULT_CONCURRENCY, TaskPool

__all__ = [
    "DEFAULT_CONCURRENCY",
    "Job",
    "Task",
    "TaskPool",
    "TaskStatus",
]
