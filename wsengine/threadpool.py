"""A priority task queue served by a fixed set of worker threads."""

from __future__ import annotations

import heapq
import itertools
import os
import queue
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from wsengine.logsys import Log, get_log


@dataclass(eq=False)
class Task:
    """A unit of work; higher priority runs first."""

    func: Callable[[], Any]
    priority: int = 0
    task_id: int = 0
    max_retry_count: int = 3
    future: Future = field(default_factory=Future, repr=False)


class TaskQueue:
    """Bounded, thread-safe priority queue of tasks."""

    def __init__(self, max_queue_size: int = 100, log: Optional[Log] = None) -> None:
        self.max_queue_size = max_queue_size
        self._log = log if log is not None else get_log()
        self._heap: list[tuple[int, int, Task]] = []
        self._counter = itertools.count()
        self._condition = threading.Condition()
        self._closed = False
        self._log.info("Task Queue created")

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, task: Task) -> None:
        with self._condition:
            if self._closed:
                raise RuntimeError("task queue is closed")
            if len(self._heap) >= self.max_queue_size:
                raise queue.Full
            heapq.heappush(self._heap, (-task.priority, next(self._counter), task))
            self._condition.notify()

    def pop(self, timeout: Optional[float] = None) -> Optional[Task]:
        """Next task by priority, or None once closed and drained.

        Raises queue.Empty if the timeout passes with nothing to return.
        """
        with self._condition:
            if not self._condition.wait_for(lambda: self._heap or self._closed, timeout):
                raise queue.Empty
            if self._heap:
                return heapq.heappop(self._heap)[2]
            return None

    def close(self) -> None:
        with self._condition:
            if not self._closed:
                self._closed = True
                self._condition.notify_all()
                self._log.info("Task Queue destroyed")

    def __len__(self) -> int:
        with self._condition:
            return len(self._heap)


class ThreadPool:
    """Worker threads that run submitted callables, retrying failures."""

    def __init__(self, thread_count: Optional[int] = None, log: Optional[Log] = None) -> None:
        self._log = log if log is not None else get_log()
        hardware = os.cpu_count() or 1
        if thread_count is None:
            thread_count = hardware
        self._log.info("Pool created")
        if thread_count <= 0:
            self._log.critical("Thread count must be greater than 0")
            raise ValueError("Thread count must be greater than 0")
        if thread_count > hardware:
            self._log.warning(
                "Thread count exceeds hardware concurrency, this will impact performance negatively!"
            )
        self._log.debug(f"Hardware concurrency: {hardware}")
        self.threads: list[threading.Thread] = []
        self.queue = TaskQueue(log=self._log)
        self._ids = itertools.count()
        self._lock = threading.Lock()
        self._shut_down = False
        self.assign_worker_threads(thread_count)

    def assign_worker_threads(self, thread_count: int) -> None:
        with self._lock:
            for _ in range(thread_count):
                index = len(self.threads)
                worker = threading.Thread(
                    target=self._work, name=f"pool-worker-{index}", daemon=True
                )
                self.threads.append(worker)
                worker.start()
                self._log.debug(f"Worker thread {index} started")

    def _work(self) -> None:
        while (task := self.queue.pop()) is not None:
            self._execute(task)

    def _execute(self, task: Task) -> None:
        if not task.future.set_running_or_notify_cancel():
            return
        error: Optional[BaseException] = None
        for attempt in range(1, task.max_retry_count + 2):
            try:
                result = task.func()
            except Exception as exc:
                error = exc
                self._log.warning(f"Task {task.task_id} failed on attempt {attempt}: {exc}")
            else:
                task.future.set_result(result)
                return
        self._log.error(f"Task {task.task_id} gave up after {task.max_retry_count} retries")
        assert error is not None
        task.future.set_exception(error)

    def submit(
        self, func: Callable[[], Any], priority: int = 0, task_id: Optional[int] = None
    ) -> Future:
        """Queue a callable; its Future holds the result or final exception."""
        if self._shut_down:
            raise RuntimeError("thread pool is shut down")
        task = Task(func, priority, next(self._ids) if task_id is None else task_id)
        self.queue.push(task)
        return task.future

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting tasks; workers finish what is queued."""
        with self._lock:
            if self._shut_down:
                return
            self._shut_down = True
        self.queue.close()
        if wait:
            for worker in self.threads:
                worker.join()
        self._log.info("Pool destroyed")

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()