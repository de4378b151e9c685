"""
Main Logger class - Asynchronous logger with a serial worker
"""

from __future__ import annotations

import functools
import threading
import weakref
from typing import Any, Callable, Dict, Union

from timberlog.core.dispatcher import Dispatcher
from timberlog.core.log_level import LogLevel
from timberlog.core.logger_config import LoggerConfig
from timberlog.core.serial_executor import SerialExecutor
from timberlog.filters.level_filter import LevelFilter

Message = Union[str, Callable[[], Any]]


class Logger:
    """
    Asynchronous logger.

    Every level method checks the threshold on the caller's thread and,
    if the message is admitted, queues one task on the logger's private
    worker. Messages may be strings or zero-argument callables; callables
    are only invoked on the worker, and never for rejected messages.

    Tearing the logger down (shutdown(), leaving a ``with`` block, or
    garbage collection) cancels queued messages that have not started.
    There is no flush: queued lines are not guaranteed to be written.

    Example:
        logger = Logger(LoggerConfig(name="app", print_log_level=True))
        logger.info("Application started")
        logger.debug(lambda: f"state={expensive_dump()}")
    """

    def __init__(self, config: LoggerConfig):
        self._config = config
        self._filter = LevelFilter(config.log_level)
        self._dispatcher = Dispatcher(config)
        self._executor = SerialExecutor(
            name=f"timberlog.logger.{config.name}",
            max_size=config.queue_size,
            overflow_policy=config.overflow_policy,
        )
        self._lock = threading.Lock()
        self._metrics = {"logged": 0, "filtered": 0}

        # Only the executor is referenced, so the logger itself can be collected
        self._finalizer = weakref.finalize(self, self._executor.shutdown)

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def level(self) -> LogLevel:
        return self._config.log_level

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether messages at ``level`` would be admitted."""
        return self._filter.allows(level)

    def log(self, level: LogLevel, message: Message) -> None:
        """
        Log a message.

        Args:
            level: Message level (ERROR through DEBUG)
            message: Text, or a zero-argument callable returning it

        Raises:
            TypeError: If level is not a LogLevel
            ValueError: If level is OFF or ALL
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not level.is_message_level:
            raise ValueError(f"Cannot log a message at level {level.display_name}")

        if not self._filter.allows(level):
            self._count("filtered")
            return

        task = functools.partial(self._dispatcher.dispatch, message, level)
        if self._executor.submit(task):
            self._count("logged")

    def error(self, message: Message) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message)

    def warn(self, message: Message) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message)

    def event(self, message: Message) -> None:
        """Log event message."""
        self.log(LogLevel.EVENT, message)

    def info(self, message: Message) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message)

    def debug(self, message: Message) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message)

    def _count(self, key: str) -> None:
        with self._lock:
            self._metrics[key] += 1

    def shutdown(self, wait: bool = True, timeout: float = 5.0) -> None:
        """
        Cancel pending messages and stop the worker.

        Writers are left open; they may be shared with other loggers.

        Args:
            wait: Block until a message being written has finished
            timeout: Maximum seconds to wait
        """
        self._finalizer.detach()
        self._executor.shutdown(wait=wait, timeout=timeout)

    @property
    def closed(self) -> bool:
        return not self._executor.running

    def get_metrics(self) -> Dict[str, int]:
        """Get logging metrics."""
        with self._lock:
            metrics = dict(self._metrics)
        executor_stats = self._executor.get_stats()
        metrics["dropped"] = executor_stats["dropped"]
        metrics["cancelled"] = executor_stats["cancelled"]
        metrics["task_errors"] = executor_stats["errors"]
        metrics.update(self._dispatcher.get_metrics())
        return metrics

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False

    def __repr__(self) -> str:
        return f"Logger(name={self._config.name!r}, level={self._config.log_level})"
