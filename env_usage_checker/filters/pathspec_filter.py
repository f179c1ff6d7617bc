"""Pathspec-based file filtering.

This module uses the pathspec library to drop discovered files that match
gitignore-style exclude patterns.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

import pathspec

logger = logging.getLogger(__name__)


# Default exclude patterns applied on top of the glob results
DEFAULT_EXCLUDE_PATTERNS: list[str] = [
    "node_modules/",
]


class PathspecFilter:
    """File filter based on gitignore-style patterns."""

    def __init__(
        self,
        repo_path: Path,
        patterns: Optional[Iterable[str]] = None,
        use_gitignore: bool = False,
    ):
        """
        Initialize the filter.

        Args:
            repo_path: Scan root; patterns are matched against paths relative to it
            patterns: Exclude patterns, defaults to DEFAULT_EXCLUDE_PATTERNS
            use_gitignore: Whether to also load the root .gitignore
        """
        self.repo_path = repo_path
        lines = list(DEFAULT_EXCLUDE_PATTERNS if patterns is None else patterns)
        if use_gitignore:
            lines.extend(self._read_gitignore())
        self._lines = lines
        self._spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)

    def _read_gitignore(self) -> list[str]:
        """Read the root .gitignore, returning no lines if it is absent."""
        gitignore_path = self.repo_path / ".gitignore"
        if not gitignore_path.is_file():
            return []
        try:
            with open(gitignore_path, encoding="utf-8") as f:
                return f.read().splitlines()
        except OSError as e:
            logger.warning(f"Failed to read {gitignore_path}: {e}")
            return []

    def should_ignore(self, path: Path) -> bool:
        """Check if a file should be excluded from the scan."""
        if path.is_absolute():
            try:
                relative = path.relative_to(self.repo_path)
            except ValueError:
                return False
        else:
            relative = path
        return self._spec.match_file(relative.as_posix())

    def filter_paths(self, paths: list[Path]) -> list[Path]:
        """Filter paths, returning those that should NOT be ignored."""
        return [p for p in paths if not self.should_ignore(p)]

    def get_patterns(self) -> list[str]:
        """Get the active exclude patterns."""
        return [line for line in self._lines if line.strip() and not line.lstrip().startswith("#")]
