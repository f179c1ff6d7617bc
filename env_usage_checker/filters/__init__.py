"""File filtering for discovered source files.

This module provides pathspec-based exclude filtering using
the mature pathspec library.
"""

from env_usage_checker.filters.pathspec_filter import (
    PathspecFilter,
    DEFAULT_EXCLUDE_PATTERNS,
)

__all__ = [
    "PathspecFilter",
    "DEFAULT_EXCLUDE_PATTERNS",
]
