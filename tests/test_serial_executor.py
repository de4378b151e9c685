"""Tests for the serial executor"""

import threading
import time

import pytest

from timberlog import OverflowPolicy
from timberlog.core.serial_executor import SerialExecutor


@pytest.fixture
def gate():
    """Event-gated first task that holds the worker busy."""
    started = threading.Event()
    release = threading.Event()

    def blocker():
        started.set()
        release.wait(2.0)

    yield blocker, started, release
    release.set()


def recorder(results, name, done=None):
    def task():
        results.append(name)
        if done is not None:
            done.set()
    return task


class TestSerialExecutor:
    """Test FIFO execution and cancellation."""

    def test_runs_tasks_in_order_on_worker(self):
        executor = SerialExecutor("exec-order")
        results = []
        done = threading.Event()
        for i in range(50):
            executor.submit(recorder(results, i))
        executor.submit(recorder(results, "end", done))

        assert done.wait(2.0)
        assert results == list(range(50)) + ["end"]
        executor.shutdown(wait=True)

        stats = executor.get_stats()
        assert stats["submitted"] == 51
        assert stats["completed"] == 51

    def test_one_task_at_a_time(self):
        executor = SerialExecutor("exec-serial")
        active = []
        overlaps = []
        done = threading.Event()

        def task():
            active.append(1)
            if len(active) > 1:
                overlaps.append(len(active))
            time.sleep(0.001)
            active.pop()

        for _ in range(20):
            executor.submit(task)
        executor.submit(done.set)

        assert done.wait(2.0)
        executor.shutdown(wait=True)
        assert overlaps == []

    def test_task_error_isolated(self, capsys):
        executor = SerialExecutor("exec-errors")
        results = []
        done = threading.Event()

        def broken():
            raise KeyError("missing")

        executor.submit(broken)
        executor.submit(recorder(results, "ok", done))

        assert done.wait(2.0)
        executor.shutdown(wait=True)
        assert results == ["ok"]
        assert executor.get_stats()["errors"] == 1
        assert "Task error in exec-errors" in capsys.readouterr().err

    def test_shutdown_cancels_pending(self, gate):
        blocker, started, release = gate
        executor = SerialExecutor("exec-cancel")
        results = []

        executor.submit(blocker)
        assert started.wait(2.0)
        executor.submit(recorder(results, "a"))
        executor.submit(recorder(results, "b"))

        executor.shutdown(wait=False)
        release.set()
        executor.worker_thread.join(2.0)

        assert results == []
        assert not executor.worker_thread.is_alive()
        assert executor.get_stats()["cancelled"] == 2

    def test_submit_after_shutdown(self):
        executor = SerialExecutor("exec-closed")
        executor.shutdown(wait=True)

        assert executor.submit(lambda: None) is False
        assert executor.get_stats()["dropped"] == 1

    def test_shutdown_from_worker_does_not_deadlock(self):
        executor = SerialExecutor("exec-self")
        done = threading.Event()

        def stop():
            executor.shutdown(wait=True)
            done.set()

        executor.submit(stop)
        assert done.wait(2.0)
        executor.worker_thread.join(2.0)
        assert not executor.running


class TestBoundedQueue:
    """Test overflow policies."""

    def test_drop_newest(self, gate):
        blocker, started, release = gate
        executor = SerialExecutor("exec-newest", max_size=2)
        results = []
        done = threading.Event()

        executor.submit(blocker)
        assert started.wait(2.0)
        assert executor.submit(recorder(results, "a"))
        assert executor.submit(recorder(results, "b", done))
        assert executor.submit(recorder(results, "c")) is False

        release.set()
        assert done.wait(2.0)
        executor.shutdown(wait=True)
        assert results == ["a", "b"]
        assert executor.get_stats()["dropped"] == 1

    def test_drop_oldest(self, gate):
        blocker, started, release = gate
        executor = SerialExecutor("exec-oldest", max_size=2, overflow_policy=OverflowPolicy.DROP_OLDEST)
        results = []
        done = threading.Event()

        executor.submit(blocker)
        assert started.wait(2.0)
        executor.submit(recorder(results, "a"))
        executor.submit(recorder(results, "b"))
        assert executor.submit(recorder(results, "c", done))

        release.set()
        assert done.wait(2.0)
        executor.shutdown(wait=True)
        assert results == ["b", "c"]
        assert executor.get_stats()["dropped"] == 1

    def test_block(self, gate):
        blocker, started, release = gate
        executor = SerialExecutor("exec-block", max_size=1, overflow_policy=OverflowPolicy.BLOCK)
        results = []
        done = threading.Event()

        executor.submit(blocker)
        assert started.wait(2.0)
        executor.submit(recorder(results, "a"))

        producer = threading.Thread(target=executor.submit, args=(recorder(results, "b", done),))
        producer.start()
        producer.join(0.1)
        assert producer.is_alive()

        release.set()
        producer.join(2.0)
        assert done.wait(2.0)
        executor.shutdown(wait=True)
        assert results == ["a", "b"]
        assert executor.get_stats()["dropped"] == 0

    def test_shutdown_releases_blocked_producers(self, gate):
        blocker, started, release = gate
        executor = SerialExecutor("exec-block-stop", max_size=1, overflow_policy=OverflowPolicy.BLOCK)
        results = []
        accepted = []

        executor.submit(blocker)
        assert started.wait(2.0)
        executor.submit(recorder(results, "a"))

        producers = [
            threading.Thread(target=lambda n=n: accepted.append(executor.submit(recorder(results, n))))
            for n in range(3)
        ]
        for producer in producers:
            producer.start()
        for producer in producers:
            producer.join(0.1)
        assert all(producer.is_alive() for producer in producers)

        executor.shutdown(wait=False)
        for producer in producers:
            producer.join(2.0)
        assert not any(producer.is_alive() for producer in producers)
        assert accepted == [False, False, False]

        release.set()
        executor.worker_thread.join(2.0)
        assert results == []
        assert executor.pending() == 0

        stats = executor.get_stats()
        assert stats["dropped"] == 3
        assert stats["cancelled"] == 1
