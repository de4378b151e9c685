"""
Level-based filter

Decides on the caller's thread whether a message level passes the
logger's threshold.
"""

from timberlog.core.log_level import LogLevel


def level_allowed(level: LogLevel, threshold: LogLevel) -> bool:
    """Return True if a message at ``level`` passes ``threshold``."""
    return level <= threshold


class LevelFilter:
    """
    Filter messages against a verbosity threshold.

    A threshold of OFF admits nothing and ALL admits every message level.
    """

    def __init__(self, threshold: LogLevel = LogLevel.INFO):
        """
        Initialize level filter.

        Args:
            threshold: Most verbose level that is still admitted.

        Example:
            # Only log WARN and ERROR
            filter = LevelFilter(LogLevel.WARN)
            filter.allows(LogLevel.ERROR)   # True
            filter.allows(LogLevel.INFO)    # False
        """
        self.threshold = threshold

    def allows(self, level: LogLevel) -> bool:
        """
        Check if a message level passes the threshold.

        Args:
            level: Level of the message

        Returns:
            True if the message should be logged, False otherwise
        """
        return level_allowed(level, self.threshold)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(threshold={self.threshold})"
