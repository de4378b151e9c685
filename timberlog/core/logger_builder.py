"""Logger builder pattern"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from timberlog.core.log_level import LogLevel
from timberlog.core.logger import Logger
from timberlog.core.logger_config import LoggerConfig, OverflowPolicy
from timberlog.formatters.color_formatter import default_color_formatters
from timberlog.writers.console_writer import ConsoleColorWriter, ConsoleWriter
from timberlog.writers.file_writer import FileWriter


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Example:
        logger = (LoggerBuilder("app")
            .with_level(LogLevel.DEBUG)
            .with_timestamp()
            .with_log_level()
            .with_default_colors()
            .with_console()
            .with_file("logs/app.log")
            .build())
    """

    def __init__(self, name: str = ""):
        self._name = name
        self._level = LogLevel.INFO
        self._print_timestamp = False
        self._print_log_level = False
        self._timestamp_formatter: Optional[Callable[[datetime], str]] = None
        self._color_formatters: Dict[LogLevel, Any] = {}
        self._writers: List[Any] = []
        self._queue_size = 0
        self._overflow_policy = OverflowPolicy.DROP_NEWEST

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set the verbosity threshold."""
        self._level = level
        return self

    def with_timestamp(self, enabled: bool = True) -> "LoggerBuilder":
        """Print a timestamp on every line."""
        self._print_timestamp = enabled
        return self

    def with_log_level(self, enabled: bool = True) -> "LoggerBuilder":
        """Print the level name on every line."""
        self._print_log_level = enabled
        return self

    def with_timestamp_formatter(self, formatter: Callable[[datetime], str]) -> "LoggerBuilder":
        """Set the callable used to render timestamps."""
        self._timestamp_formatter = formatter
        return self

    def with_color_formatter(self, level: LogLevel, formatter: Any) -> "LoggerBuilder":
        """Register a color formatter for one level."""
        self._color_formatters[level] = formatter
        return self

    def with_color_formatters(self, formatters: Mapping[LogLevel, Any]) -> "LoggerBuilder":
        """Register color formatters for several levels."""
        self._color_formatters.update(formatters)
        return self

    def with_default_colors(self) -> "LoggerBuilder":
        """Register the default ANSI palette for every message level."""
        return self.with_color_formatters(default_color_formatters())

    def with_console(self, colored: bool = True, stream=None) -> "LoggerBuilder":
        """Add a console writer."""
        writer = ConsoleColorWriter(stream) if colored else ConsoleWriter(stream)
        self._writers.append(writer)
        return self

    def with_file(self, filepath: str) -> "LoggerBuilder":
        """Add a file writer."""
        self._writers.append(FileWriter(filepath))
        return self

    def add_writer(self, writer: Any) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Object with write(message), optionally write_colored(message, formatter)

        Returns:
            Self for method chaining
        """
        self._writers.append(writer)
        return self

    def with_queue_size(
        self,
        size: int,
        policy: OverflowPolicy = OverflowPolicy.DROP_NEWEST,
    ) -> "LoggerBuilder":
        """Bound the pending-message queue."""
        self._queue_size = size
        self._overflow_policy = policy
        return self

    def build_config(self) -> LoggerConfig:
        """Build the configuration without starting a logger."""
        options = {}
        if self._timestamp_formatter is not None:
            options["timestamp_formatter"] = self._timestamp_formatter

        return LoggerConfig(
            name=self._name,
            log_level=self._level,
            print_timestamp=self._print_timestamp,
            print_log_level=self._print_log_level,
            color_formatters=dict(self._color_formatters),
            writers=tuple(self._writers),
            queue_size=self._queue_size,
            overflow_policy=self._overflow_policy,
            **options,
        )

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(self.build_config())
