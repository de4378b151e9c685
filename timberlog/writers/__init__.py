"""Writers module - Log output handlers"""

from timberlog.writers.base_writer import BaseWriter, ColorWriter, supports_color
from timberlog.writers.console_writer import ConsoleColorWriter, ConsoleWriter
from timberlog.writers.file_writer import FileWriter

__all__ = [
    "BaseWriter",
    "ColorWriter",
    "ConsoleColorWriter",
    "ConsoleWriter",
    "FileWriter",
    "supports_color",
]
