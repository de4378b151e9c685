"""
Logger configuration management

A configuration is frozen once built; loggers read it from their worker
without locking.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence

from timberlog.core.exceptions import ConfigurationError
from timberlog.core.log_level import LogLevel
from timberlog.formatters.color_formatter import default_color_formatters
from timberlog.formatters.timestamp_formatter import TimestampFormatter
from timberlog.writers.console_writer import ConsoleColorWriter, ConsoleWriter


class OverflowPolicy(Enum):
    """What a bounded queue does when it is full."""

    DROP_NEWEST = "drop_newest"   # Discard the message being emitted
    DROP_OLDEST = "drop_oldest"   # Discard the oldest queued message
    BLOCK = "block"               # Wait for room on the caller's thread


@dataclass(frozen=True, eq=False)
class LoggerConfig:
    """
    Logger configuration.

    ``writers`` defaults to a single console writer: a ConsoleColorWriter
    when color formatters are registered, a plain ConsoleWriter otherwise.
    """

    # Basic settings
    name: str
    log_level: LogLevel = LogLevel.INFO

    # Format settings
    print_timestamp: bool = False
    print_log_level: bool = False
    timestamp_formatter: Callable[[datetime], str] = field(default_factory=TimestampFormatter)
    color_formatters: Mapping[LogLevel, Any] = field(default_factory=dict)

    # Output
    writers: Sequence[Any] = ()

    # Queue settings (0 means unbounded)
    queue_size: int = 0
    overflow_policy: OverflowPolicy = OverflowPolicy.DROP_NEWEST

    # Source of timestamps for log lines
    clock: Callable[[], datetime] = datetime.now

    def __post_init__(self):
        """Validate and freeze configuration after initialization."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError("A logger must have a non-empty name")
        if not isinstance(self.log_level, LogLevel):
            raise ConfigurationError("log_level must be LogLevel enum")
        if not callable(self.timestamp_formatter):
            raise ConfigurationError("timestamp_formatter must be callable")
        if not callable(self.clock):
            raise ConfigurationError("clock must be callable")
        if not isinstance(self.queue_size, int) or self.queue_size < 0:
            raise ConfigurationError("queue_size must be a non-negative integer")
        if not isinstance(self.overflow_policy, OverflowPolicy):
            raise ConfigurationError("overflow_policy must be OverflowPolicy enum")

        color_formatters = dict(self.color_formatters or {})
        for level in color_formatters:
            if not isinstance(level, LogLevel) or not level.is_message_level:
                raise ConfigurationError(f"Color formatter registered for invalid level: {level!r}")

        writers = tuple(self.writers or ())
        for writer in writers:
            if not callable(getattr(writer, "write", None)):
                raise ConfigurationError(f"Writer has no write() method: {writer!r}")
        if not writers:
            writers = (ConsoleColorWriter() if color_formatters else ConsoleWriter(),)

        # Frozen dataclass: bypass __setattr__ for the normalized values
        object.__setattr__(self, "color_formatters", MappingProxyType(color_formatters))
        object.__setattr__(self, "writers", writers)

    @classmethod
    def default(cls, name: str) -> "LoggerConfig":
        """Create default configuration."""
        return cls(name=name)

    @classmethod
    def debug_config(cls, name: str) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            name=name,
            log_level=LogLevel.DEBUG,
            print_timestamp=True,
            print_log_level=True,
            color_formatters=default_color_formatters(),
        )

    @classmethod
    def production_config(cls, name: str, writers: Optional[Sequence[Any]] = None) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            name=name,
            log_level=LogLevel.WARN,
            print_timestamp=True,
            print_log_level=True,
            writers=writers or (),
            queue_size=20000,
            overflow_policy=OverflowPolicy.DROP_OLDEST,
        )
