# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Ignore-file handling for scan roots."""

import logging
import os
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

IGNORE_FILE_NAME = ".gitignore"


class IgnoreMatcher:
    """Match scan-relative paths against .gitignore patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        """Initialize matcher.

        Args:
            spec: Compiled gitignore matcher.
        """
        self._spec = spec

    @classmethod
    def from_patterns(cls, patterns: list[str]) -> "IgnoreMatcher":
        """Build matcher from already parsed pattern lines."""
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(patterns))

    @classmethod
    def from_root(cls, root_path: Path) -> "IgnoreMatcher":
        """Build matcher from the ignore file at a scan root.

        A missing or unreadable ignore file yields a matcher without rules.

        Args:
            root_path: Scan root directory.

        Returns:
            Configured ignore matcher.
        """
        return cls.from_patterns(load_ignore_patterns(root_path))

    def matches(self, relative_path: str, is_dir: bool = False) -> bool:
        """Check whether a path should be ignored.

        Args:
            relative_path: Root-relative path.
            is_dir: Whether the path is a directory.

        Returns:
            True when path should be ignored.
        """
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        if self._spec.match_file(normalized):
            return True
        if is_dir and self._spec.match_file(f"{normalized}/"):
            return True
        return False


def load_ignore_patterns(root_path: Path) -> list[str]:
    """Read ignore patterns from ``<root_path>/.gitignore``.

    Blank lines and ``#`` comment lines are dropped.

    Args:
        root_path: Scan root directory.

    Returns:
        Pattern lines, empty when the file is absent or unreadable.
    """
    ignore_path = root_path / IGNORE_FILE_NAME
    if not ignore_path.is_file():
        return []
    try:
        content = ignore_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            f"Failed to read ignore file; scanning without exclusions "
            f"(path={ignore_path} error={exc})"
        )
        return []
    patterns = [line.strip() for line in content.split("\n")]
    return [line for line in patterns if line and not line.startswith("#")]
