"""Default timestamp formatter"""

from datetime import datetime


class TimestampFormatter:
    """
    Render a point in time as text.

    Any callable taking a ``datetime`` and returning a string can be used
    in its place; this is the one used when none is configured.
    """

    DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

    def __init__(self, fmt: str = DEFAULT_FORMAT, milliseconds: bool = True):
        """
        Initialize timestamp formatter.

        Args:
            fmt: strftime pattern
            milliseconds: Truncate a trailing ``%f`` to millisecond precision

        Example:
            TimestampFormatter()(datetime(2024, 1, 2, 3, 4, 5, 678901))
            # '2024-01-02 03:04:05.678'
        """
        self.fmt = fmt
        self.milliseconds = milliseconds

    def format(self, timestamp: datetime) -> str:
        """Format ``timestamp`` with the configured pattern."""
        text = timestamp.strftime(self.fmt)
        if self.milliseconds and self.fmt.endswith("%f"):
            text = text[:-3]  # Remove last 3 digits
        return text

    def __call__(self, timestamp: datetime) -> str:
        return self.format(timestamp)

    def __repr__(self) -> str:
        """String representation."""
        return f"TimestampFormatter(fmt='{self.fmt}')"
