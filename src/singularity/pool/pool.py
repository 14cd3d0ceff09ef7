"""Bounded-concurrency pool that runs every submitted job exactly once."""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Sequence

from singularity.errors import BuildError
from singularity.pool.models import Job, Task

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 10


class TaskPool:
    """Runs a fixed list of jobs across ``concurrency`` worker threads.

    Tasks are exposed in submission order regardless of the order in which
    they complete, so failure reporting is reproducible across runs. A pool
    is single-use: build a new one per build invocation.
    """

    def __init__(self, jobs: Sequence[Job], concurrency: int = DEFAULT_CONCURRENCY) -> None:
        if concurrency < 1:
            raise ValueError(f"Task pool concurrency must be a positive integer, got {concurrency}")
        self.concurrency = concurrency
        self._tasks = tuple(Task(job=job) for job in jobs)
        self._run_lock = threading.Lock()
        self._started = False

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def run(self) -> None:
        """Block until every task has an outcome."""

        with self._run_lock:
            if self._started:
                raise RuntimeError("TaskPool.run() may only be called once per pool.")
            self._started = True

        pending: queue.Queue[Task] = queue.Queue()
        for task in self._tasks:
            pending.put(task)

        workers = [
            threading.Thread(
                target=self._work,
                args=(pending,),
                name=f"task-pool-worker-{index}",
                daemon=True,
            )
            for index in range(self.concurrency)
        ]
        logger.debug("Running %d tasks on %d workers", len(self._tasks), len(workers))
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        unfinished = [task.job.describe() for task in self._tasks if not task.done]
        if unfinished:
            raise RuntimeError(f"Task pool finished with tasks left pending: {unfinished}")

    def has_errors(self) -> bool:
        return any(task.failed for task in self._tasks)

    def failed_tasks(self) -> list[Task]:
        return [task for task in self._tasks if task.failed]

    def _work(self, pending: queue.Queue[Task]) -> None:
        while True:
            try:
                task = pending.get_nowait()
            except queue.Empty:
                return
            try:
                self._execute(task)
            finally:
                pending.task_done()

    def _execute(self, task: Task) -> None:
        started = time.monotonic()
        try:
            task.job()
        except Exception as exc:
            summary = None
            if not isinstance(exc, (BuildError, OSError)):
                summary = f"{task.job.describe()}: {type(exc).__name__}: {exc}"
                logger.error("Unexpected error in %s", task.job.describe(), exc_info=True)
            task.mark_failed(exc, duration_seconds=time.monotonic() - started, summary=summary)
        except BaseException as exc:  # noqa: BLE001
            summary = (
                f"{task.job.describe()}: aborted with fault {type(exc).__name__}: {exc}"
            )
            logger.error("%s", summary, exc_info=True)
            task.mark_failed(exc, duration_seconds=time.monotonic() - started, summary=summary)
        else:
            task.mark_succeeded(duration_seconds=time.monotonic() - started)
            logger.debug("Finished %s in %.3fs", task.job.describe(), task.duration_seconds)

