# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Scan orchestration: ignore rules, enumeration and per-file extraction."""

import concurrent.futures
import logging
from pathlib import Path

from symscan.enumerator import enumerate_files
from symscan.extractor import FileReadError, extract_symbols, relative_posix_path
from symscan.ignore import IgnoreMatcher
from symscan.model import ScanError, ScanRequest, ScanResult, SymbolKind, SymbolRecord

logger = logging.getLogger(__name__)


class Scanner:
    """Run one enumeration-and-extraction pass per request."""

    def __init__(self, max_workers: int = 1) -> None:
        """Initialize scanner.

        Args:
            max_workers: Worker threads used for per-file extraction. ``1``
                extracts sequentially.

        Raises:
            ValueError: If ``max_workers`` is not greater than zero.
        """
        if max_workers <= 0:
            raise ValueError("max_workers must be > 0")
        self._max_workers = max_workers

    def scan(self, request: ScanRequest, kind: SymbolKind) -> ScanResult:
        """Scan a root path for symbols of one kind.

        Unreadable files inside a directory are skipped and reported in
        ``ScanResult.errors``. When the root is a single file, its read error
        is raised instead.

        Args:
            request: Root path and depth limit.
            kind: Symbol category to extract.

        Returns:
            Records from all scanned files, concatenated in enumeration order.

        Raises:
            ValueError: If ``request.max_depth`` is negative.
            FileReadError: If a single-file root cannot be read.
        """
        if request.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        root_path = Path(request.root_path).resolve()

        if root_path.is_file():
            records = extract_symbols(
                file_path=root_path, base_path=root_path.parent, kind=kind
            )
            return ScanResult(records=records, errors=[])

        matcher = IgnoreMatcher.from_root(root_path)
        files = enumerate_files(
            root_path=root_path, max_depth=request.max_depth, matcher=matcher
        )
        per_file = self._extract_all(files=files, root_path=root_path, kind=kind)

        records: list[SymbolRecord] = []
        errors: list[ScanError] = []
        for file_records, error in per_file:
            records.extend(file_records)
            if error is not None:
                errors.append(error)
        logger.info(
            f"Scan completed (path={root_path} kind={kind} files={len(files)} "
            f"records={len(records)} errors={len(errors)})"
        )
        return ScanResult(records=records, errors=errors)

    def _extract_all(
        self, files: list[Path], root_path: Path, kind: SymbolKind
    ) -> list[tuple[list[SymbolRecord], ScanError | None]]:
        if self._max_workers == 1 or len(files) <= 1:
            return [self._extract_one(path, root_path, kind) for path in files]

        results: list[tuple[list[SymbolRecord], ScanError | None]] = [
            ([], None) for _ in files
        ]
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self._max_workers
        ) as executor:
            future_to_index = {
                executor.submit(self._extract_one, path, root_path, kind): index
                for index, path in enumerate(files)
            }
            for future in concurrent.futures.as_completed(future_to_index):
                results[future_to_index[future]] = future.result()
        return results

    def _extract_one(
        self, file_path: Path, root_path: Path, kind: SymbolKind
    ) -> tuple[list[SymbolRecord], ScanError | None]:
        try:
            records = extract_symbols(
                file_path=file_path, base_path=root_path, kind=kind
            )
        except FileReadError as exc:
            relative_path = relative_posix_path(
                file_path=file_path, base_path=root_path
            )
            logger.warning(
                f"Skipping file due to read failure (file_path={relative_path} error={exc})"
            )
            return [], ScanError(file_path=relative_path, message=str(exc))
        return records, None
