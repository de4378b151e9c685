"""
Serial executor

One worker thread draining a FIFO queue, so at most one task runs at a
time and tasks run in the order they were submitted.
"""

from __future__ import annotations

import sys
import threading
from collections import deque
from typing import Callable, Deque, Dict

from timberlog.core.logger_config import OverflowPolicy


class SerialExecutor:
    """
    Single-worker task queue.

    Cancellation discards every queued task that has not started; a task
    already running is allowed to finish. Producers waiting for room under
    the BLOCK policy are woken by shutdown() and their tasks dropped.

    Thread Safety:
        submit() may be called from any thread. The running check and the
        enqueue happen under one condition shared with shutdown().
    """

    def __init__(
        self,
        name: str,
        max_size: int = 0,
        overflow_policy: OverflowPolicy = OverflowPolicy.DROP_NEWEST,
    ):
        """
        Initialize and start the executor.

        Args:
            name: Worker thread name
            max_size: Queue capacity, 0 for unbounded
            overflow_policy: Behaviour when a bounded queue is full
        """
        self.name = name
        self.max_size = max_size
        self.overflow_policy = overflow_policy

        self._tasks: Deque[Callable[[], None]] = deque()
        self._cond = threading.Condition()
        self._running = True
        self._stats = {"submitted": 0, "completed": 0, "dropped": 0, "cancelled": 0, "errors": 0}

        self._worker_thread = threading.Thread(
            target=self._process_queue,
            name=name,
            daemon=True,
        )
        self._worker_thread.start()

    @property
    def running(self) -> bool:
        return self._running

    @property
    def worker_thread(self) -> threading.Thread:
        return self._worker_thread

    def pending(self) -> int:
        """Number of queued tasks not yet started."""
        with self._cond:
            return len(self._tasks)

    def submit(self, task: Callable[[], None]) -> bool:
        """
        Queue a task for the worker.

        Args:
            task: Zero-argument callable

        Returns:
            True if the task was queued, False if it was dropped
        """
        with self._cond:
            while True:
                if not self._running:
                    self._stats["dropped"] += 1
                    return False

                if not self.max_size or len(self._tasks) < self.max_size:
                    self._tasks.append(task)
                    self._stats["submitted"] += 1
                    self._cond.notify_all()
                    return True

                if self.overflow_policy is OverflowPolicy.DROP_NEWEST:
                    self._stats["dropped"] += 1
                    return False
                if self.overflow_policy is OverflowPolicy.DROP_OLDEST:
                    self._tasks.popleft()
                    self._stats["dropped"] += 1
                    continue

                # BLOCK: wait for the worker to take a task or for shutdown
                self._cond.wait()

    def _process_queue(self) -> None:
        """Run queued tasks one at a time (worker thread)."""
        while True:
            with self._cond:
                while self._running and not self._tasks:
                    self._cond.wait()
                if not self._running:
                    break
                task = self._tasks.popleft()
                self._cond.notify_all()

            self._run(task)

    def _run(self, task: Callable[[], None]) -> None:
        try:
            task()
        except Exception as e:
            self._count("errors")
            print(f"Task error in {self.name}: {e}", file=sys.stderr)
        else:
            self._count("completed")

    def _count(self, key: str, amount: int = 1) -> None:
        with self._cond:
            self._stats[key] += amount

    def shutdown(self, wait: bool = False, timeout: float = 5.0) -> None:
        """
        Cancel queued tasks and stop the worker.

        Args:
            wait: Block until the running task (if any) has finished
            timeout: Maximum seconds to wait
        """
        with self._cond:
            if not self._running:
                return
            self._running = False
            self._stats["cancelled"] += len(self._tasks)
            self._tasks.clear()
            self._cond.notify_all()

        if wait and threading.current_thread() is not self._worker_thread:
            self._worker_thread.join(timeout=timeout)

    def get_stats(self) -> Dict[str, int]:
        """Get executor counters."""
        with self._cond:
            return dict(self._stats)
