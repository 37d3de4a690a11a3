# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Pattern-based function and class lister."""

from symscan.enumerator import enumerate_files
from symscan.extractor import (
    FileReadError,
    extract_classes,
    extract_functions,
    extract_symbols,
)
from symscan.ignore import IgnoreMatcher
from symscan.model import ScanError, ScanRequest, ScanResult, SymbolKind, SymbolRecord
from symscan.scanner import Scanner
from symscan.tools import TOOLS, handle_tool_call

__all__ = [
    "FileReadError",
    "IgnoreMatcher",
    "ScanError",
    "ScanRequest",
    "ScanResult",
    "Scanner",
    "SymbolKind",
    "SymbolRecord",
    "TOOLS",
    "enumerate_files",
    "extract_classes",
    "extract_functions",
    "extract_symbols",
    "handle_tool_call",
]
