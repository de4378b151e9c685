"""
Log entry data structure

Built on the worker once a message has been admitted and its text is known.
"""

from dataclasses import dataclass, field
from datetime import datetime

from timberlog.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything the message formatter needs for one log line.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    logger_name: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not self.level.is_message_level:
            raise ValueError(f"{self.level.display_name} is not a message level")
        if not isinstance(self.message, str):
            self.message = str(self.message)
