"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

timberlog - An embeddable asynchronous logger with pluggable writers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from timberlog.core.exceptions import ConfigurationError
from timberlog.core.log_entry import LogEntry
from timberlog.core.log_level import LogLevel
from timberlog.core.logger import Logger
from timberlog.core.logger_builder import LoggerBuilder
from timberlog.core.logger_config import LoggerConfig, OverflowPolicy
from timberlog.formatters.color_formatter import ColorFormatter

# Import submodules (not all classes by default)
from timberlog import filters
from timberlog import formatters
from timberlog import writers

__all__ = [
    "ColorFormatter",
    "ConfigurationError",
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "OverflowPolicy",
    "filters",
    "formatters",
    "writers",
]
