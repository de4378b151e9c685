"""
Message dispatcher

Runs on the logger's worker: builds the log line for an admitted message
and hands it to every writer.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable, Dict, List, Tuple, Union

from timberlog.core.log_entry import LogEntry
from timberlog.core.log_level import LogLevel
from timberlog.core.logger_config import LoggerConfig
from timberlog.formatters.message_formatter import MessageFormatter
from timberlog.writers.base_writer import supports_color

MessageSource = Union[str, Callable[[], Any]]


class Dispatcher:
    """
    Format admitted messages and route them to writers.

    Each writer's color capability is resolved once, when the dispatcher
    is built. Writers are called in configuration order and a failing
    writer never stops the ones after it.
    """

    def __init__(self, config: LoggerConfig):
        self._config = config
        self._formatter = MessageFormatter.from_config(config)
        self._routes: List[Tuple[Any, bool]] = [
            (writer, supports_color(writer)) for writer in config.writers
        ]
        self._lock = threading.Lock()
        self._metrics = {"processed": 0, "writer_errors": 0}

    @property
    def formatter(self) -> MessageFormatter:
        return self._formatter

    def dispatch(self, source: MessageSource, level: LogLevel) -> None:
        """
        Resolve, format and write one message.

        Args:
            source: Message text, or a zero-argument callable producing it
            level: Message level
        """
        message = source() if callable(source) else source
        entry = LogEntry(
            level=level,
            message=message,
            timestamp=self._config.clock(),
            logger_name=self._config.name,
        )
        self.write(self._formatter.format(entry), level)

    def write(self, line: str, level: LogLevel) -> None:
        """Write a formatted line to every writer."""
        color_formatter = self._config.color_formatters.get(level)

        for writer, colored in self._routes:
            try:
                if colored and color_formatter is not None:
                    writer.write_colored(line, color_formatter)
                else:
                    writer.write(line)
            except Exception as e:
                self._count("writer_errors")
                print(f"Writer error in {self._config.name}: {e}", file=sys.stderr)

        self._count("processed")

    def _count(self, key: str) -> None:
        with self._lock:
            self._metrics[key] += 1

    def get_metrics(self) -> Dict[str, int]:
        """Get dispatch counters."""
        with self._lock:
            return dict(self._metrics)
