"""
Log level enumeration

Levels double as message severities and as logger thresholds.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    The ordinal is the verbosity rank: a message is admitted when its
    level is less than or equal to the configured threshold. OFF and ALL
    are thresholds only; no message is ever emitted at those levels.
    """

    OFF = 0     # Nothing is logged
    ERROR = 1   # Errors only
    WARN = 2    # Warnings and errors
    EVENT = 3   # Notable application events
    INFO = 4    # Informational messages
    DEBUG = 5   # Debug information
    ALL = 6     # Everything is logged

    def __str__(self) -> str:
        """String representation of log level."""
        return self.display_name

    @property
    def display_name(self) -> str:
        """Name used when the level is printed in a log line."""
        return LEVEL_NAMES[self]

    @property
    def is_message_level(self) -> bool:
        """Whether messages may be emitted at this level."""
        return self not in (LogLevel.OFF, LogLevel.ALL)

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.strip().lower())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level


LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.OFF: "Off",
    LogLevel.ERROR: "Error",
    LogLevel.WARN: "Warn",
    LogLevel.EVENT: "Event",
    LogLevel.INFO: "Info",
    LogLevel.DEBUG: "Debug",
    LogLevel.ALL: "All",
}

# Reverse mapping, keyed by lowercase name
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v.lower(): k for k, v in LEVEL_NAMES.items()}
