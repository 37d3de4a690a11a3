# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for symbol scans."""

from dataclasses import dataclass, field
from typing import Literal

SymbolKind = Literal["function", "class"]

DEFAULT_MAX_DEPTH = 4


@dataclass(frozen=True)
class SymbolRecord:
    """Represent one detected symbol declaration.

    Attributes:
        name: Declared symbol name.
        kind: Symbol category.
        line: Line of the matched declaration (1-based).
        file: Slash-normalized path relative to the scan base.
    """

    name: str
    kind: SymbolKind
    line: int
    file: str

    def to_dict(self) -> dict[str, str | int]:
        """Return the structured rendering keyed by symbol kind."""
        return {self.kind: self.name, "line": self.line, "file": self.file}

    def to_text(self) -> str:
        """Return the plain-text rendering ``<name>; <file>:<line>``."""
        return f"{self.name}; {self.file}:{self.line}"


@dataclass(frozen=True)
class ScanRequest:
    """Describe one enumeration-and-extraction pass.

    Attributes:
        root_path: Directory (or single file) to scan.
        max_depth: Number of directory levels below root to descend.
    """

    root_path: str
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class ScanError:
    """Represent a recoverable read failure for one file."""

    file_path: str
    message: str


@dataclass(frozen=True)
class ScanResult:
    """Represent records and skipped files for one scan."""

    records: list[SymbolRecord] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)
