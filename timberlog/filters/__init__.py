"""
Log filters module

Provides the level filter that gates messages before they are queued.
"""

from timberlog.filters.level_filter import LevelFilter, level_allowed

__all__ = [
    "LevelFilter",
    "level_allowed",
]
