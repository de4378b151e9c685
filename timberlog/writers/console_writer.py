"""Console writers, with and without ANSI colors"""

import sys
import threading

from timberlog.writers.base_writer import BaseWriter, ColorWriter


class ConsoleWriter(BaseWriter):
    """Write log lines to a console stream."""

    def __init__(self, stream=None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stderr at write time)
        """
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self):
        return self._stream or sys.stderr

    def write(self, message: str) -> None:
        """Write log line to console."""
        with self._lock:
            self.stream.write(message + "\n")
            self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        with self._lock:
            self.stream.flush()


class ConsoleColorWriter(ConsoleWriter, ColorWriter):
    """Write log lines to a console stream, colored when a formatter is given."""

    def write_colored(self, message: str, color_formatter) -> None:
        """Write log line wrapped in the formatter's colors."""
        self.write(color_formatter.format(message))
