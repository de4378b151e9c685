"""
Writer interfaces

A writer receives fully formatted log lines. Color-capable writers also
accept a color formatter alongside the line.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseWriter(ABC):
    """Abstract base class for plain writers."""

    @abstractmethod
    def write(self, message: str) -> None:
        """
        Write a formatted log line.

        Args:
            message: The formatted line, without trailing newline
        """
        pass

    def flush(self) -> None:
        """Flush buffered output."""

    def close(self) -> None:
        """Release resources held by the writer."""


class ColorWriter(BaseWriter):
    """Abstract base class for writers that can render colors."""

    @abstractmethod
    def write_colored(self, message: str, color_formatter: Any) -> None:
        """
        Write a formatted log line using a color formatter.

        Args:
            message: The formatted line, without trailing newline
            color_formatter: Formatter registered for the message level
        """
        pass


def supports_color(writer: Any) -> bool:
    """
    Check whether a writer accepts colored writes.

    Subclasses of ColorWriter qualify, as does any object exposing a
    callable ``write_colored``.
    """
    if isinstance(writer, ColorWriter):
        return True
    return callable(getattr(writer, "write_colored", None))
