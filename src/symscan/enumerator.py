# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Depth-limited, ignore-aware file discovery."""

import logging
from pathlib import Path

from symscan.ignore import IgnoreMatcher

logger = logging.getLogger(__name__)


def enumerate_files(
    root_path: Path, max_depth: int, matcher: IgnoreMatcher
) -> list[Path]:
    """Collect candidate files beneath a scan root.

    A file is kept when at most ``max_depth`` directories separate it from
    ``root_path`` and its root-relative path is not ignored. Hidden entries
    are candidates like any other; symbolic links are followed.

    Args:
        root_path: Directory to walk, or a single file.
        max_depth: Directory levels below root to descend (0 keeps direct
            children only).
        matcher: Ignore rules loaded for ``root_path``.

    Returns:
        Candidate file paths, or an empty list when the root is missing or the
        walk fails.
    """
    if not root_path.exists():
        logger.warning(f"Path does not exist (path={root_path})")
        return []
    if root_path.is_file():
        return [root_path]

    # An unreadable subdirectory fails the whole walk.
    try:
        files = _walk(root_path=root_path, max_depth=max_depth, matcher=matcher)
    except OSError as exc:
        logger.warning(f"Directory walk failed (path={root_path} error={exc})")
        return []
    logger.debug(f"Enumerated files (path={root_path} files={len(files)})")
    return files


def _walk(root_path: Path, max_depth: int, matcher: IgnoreMatcher) -> list[Path]:
    files: list[Path] = []
    queue: list[tuple[Path, int]] = [(root_path, 0)]

    while queue:
        current, depth = queue.pop(0)
        for child in sorted(current.iterdir(), key=lambda item: item.name):
            relative_child = child.relative_to(root_path).as_posix()
            is_dir = child.is_dir()
            if matcher.matches(relative_path=relative_child, is_dir=is_dir):
                continue
            if is_dir:
                if depth < max_depth:
                    queue.append((child, depth + 1))
                continue
            if child.is_file():
                files.append(child)

    return files
