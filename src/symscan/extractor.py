# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line-based symbol extraction."""

import logging
import os
from pathlib import Path

from symscan.model import SymbolKind, SymbolRecord
from symscan.rules import RULES_BY_KIND, PatternRule

logger = logging.getLogger(__name__)


class FileReadError(RuntimeError):
    """Represent a failure to read or decode a source file."""

    def __init__(self, file_path: Path, message: str) -> None:
        super().__init__(f"{file_path}: {message}")
        self.file_path = file_path


def extract_functions(file_path: Path, base_path: Path) -> list[SymbolRecord]:
    """Extract function declarations from one file."""
    return extract_symbols(file_path=file_path, base_path=base_path, kind="function")


def extract_classes(file_path: Path, base_path: Path) -> list[SymbolRecord]:
    """Extract class declarations from one file."""
    return extract_symbols(file_path=file_path, base_path=base_path, kind="class")


def extract_symbols(
    file_path: Path, base_path: Path, kind: SymbolKind
) -> list[SymbolRecord]:
    """Apply the rule table for ``kind`` to every line of a file.

    Only the first occurrence of a name is recorded per file; later matches
    of the same name, by any rule, are dropped. Lines are split on line feeds
    only, so a carriage return stays part of its line. A leading UTF-8 byte
    order mark is removed.

    Args:
        file_path: Source file to scan.
        base_path: Directory that reported paths are made relative to.
        kind: Symbol category selecting the rule table.

    Returns:
        Records in line order, then rule order within a line.

    Raises:
        FileReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        content = file_path.read_bytes().decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(file_path=file_path, message=str(exc)) from exc

    relative_file = relative_posix_path(file_path=file_path, base_path=base_path)
    return scan_lines(
        lines=content.split("\n"),
        rules=RULES_BY_KIND[kind],
        kind=kind,
        relative_file=relative_file,
    )


def scan_lines(
    lines: list[str],
    rules: tuple[PatternRule, ...],
    kind: SymbolKind,
    relative_file: str,
) -> list[SymbolRecord]:
    """Match rules against lines and build deduplicated records."""
    records: list[SymbolRecord] = []
    seen: set[str] = set()
    previous_line: str | None = None

    for line_no, line in enumerate(lines, start=1):
        for rule in rules:
            name = rule.match_name(line=line, previous_line=previous_line)
            if name is None or name in seen:
                continue
            seen.add(name)
            records.append(
                SymbolRecord(name=name, kind=kind, line=line_no, file=relative_file)
            )
        previous_line = line

    return records


def relative_posix_path(file_path: Path, base_path: Path) -> str:
    """Return ``file_path`` relative to ``base_path`` with forward slashes."""
    return os.path.relpath(file_path, base_path).replace(os.sep, "/")
