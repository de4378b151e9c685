"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from timberlog.core.exceptions import ConfigurationError
from timberlog.core.log_entry import LogEntry
from timberlog.core.log_level import LogLevel
from timberlog.core.logger import Logger
from timberlog.core.logger_builder import LoggerBuilder
from timberlog.core.logger_config import LoggerConfig, OverflowPolicy

__all__ = [
    "ConfigurationError",
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "OverflowPolicy",
]
