"""
Message formatter

Assembles the final log line from the optional timestamp, the optional
level name and the message text.
"""

from datetime import datetime
from typing import Callable, List

from timberlog.core.log_entry import LogEntry
from timberlog.formatters.base_formatter import BaseFormatter
from timberlog.formatters.timestamp_formatter import TimestampFormatter


class MessageFormatter(BaseFormatter):
    """
    Format log entries as ``[timestamp] [level] message`` lines.

    Bracketing depends on how many parts are printed:

    - message only: ``hi``
    - timestamp or level, not both: ``[T] hi`` / ``[Error] hi``
    - timestamp and level: ``T [Info] hi``

    The timestamp is left bare when the level is also printed.
    """

    def __init__(
        self,
        print_timestamp: bool = False,
        print_log_level: bool = False,
        timestamp_formatter: Callable[[datetime], str] = None,
    ):
        """
        Initialize message formatter.

        Args:
            print_timestamp: Prefix lines with the formatted timestamp
            print_log_level: Prefix lines with the level display name
            timestamp_formatter: Callable rendering the entry timestamp
        """
        self.print_timestamp = print_timestamp
        self.print_log_level = print_log_level
        self.timestamp_formatter = timestamp_formatter or TimestampFormatter()

    @classmethod
    def from_config(cls, config) -> "MessageFormatter":
        """Create a formatter matching a LoggerConfig."""
        return cls(
            print_timestamp=config.print_timestamp,
            print_log_level=config.print_log_level,
            timestamp_formatter=config.timestamp_formatter,
        )

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry into a single line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        parts: List[str] = []

        if self.print_timestamp:
            parts.append(self.timestamp_formatter(entry.timestamp))

        if self.print_log_level:
            parts.append(entry.level.display_name)

        parts.append(entry.message)

        if len(parts) == 2:
            parts[0] = f"[{parts[0]}]"
        elif len(parts) == 3:
            parts[1] = f"[{parts[1]}]"

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"MessageFormatter(timestamp={self.print_timestamp}, "
            f"level={self.print_log_level})"
        )
