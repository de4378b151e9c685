"""
Log formatters module

Provides the line formatter, the default timestamp formatter and ANSI
color formatters.
"""

from timberlog.formatters.base_formatter import BaseFormatter
from timberlog.formatters.color_formatter import ColorFormatter, default_color_formatters
from timberlog.formatters.message_formatter import MessageFormatter
from timberlog.formatters.timestamp_formatter import TimestampFormatter

__all__ = [
    "BaseFormatter",
    "ColorFormatter",
    "MessageFormatter",
    "TimestampFormatter",
    "default_color_formatters",
]
