# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command-line entry point for symbol scans and the MCP server."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table

from symscan.extractor import FileReadError
from symscan.model import (
    DEFAULT_MAX_DEPTH,
    ScanError,
    ScanRequest,
    SymbolKind,
    SymbolRecord,
)
from symscan.scanner import Scanner
from symscan.server import run_server
from symscan.tools import render_records

logger = logging.getLogger(__name__)

COMMAND_KINDS: dict[str, SymbolKind] = {
    "functions": "function",
    "classes": "class",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler on stderr.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="symscan")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging severity threshold.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, kind in COMMAND_KINDS.items():
        scan_parser = subparsers.add_parser(command, help=f"List {kind} declarations.")
        scan_parser.add_argument(
            "--path", required=True, help="Root directory (or file) to scan."
        )
        scan_parser.add_argument(
            "--max-depth",
            type=int,
            default=DEFAULT_MAX_DEPTH,
            help="Directory levels below the root to descend.",
        )
        scan_parser.add_argument(
            "--format",
            choices=("text", "json", "table"),
            default="text",
            help="Output format.",
        )
        scan_parser.add_argument(
            "--workers",
            type=int,
            default=1,
            help="Worker threads used for per-file extraction.",
        )

    serve_parser = subparsers.add_parser("serve", help="Run the stdio MCP server.")
    serve_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker threads used for per-file extraction.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    logging.getLogger().setLevel(args.log_level)

    if args.workers <= 0:
        logger.warning(f"Invalid worker count (workers={args.workers})")
        stderr.write("workers must be > 0\n")
        return 2
    if args.command == "serve":
        run_server(max_workers=args.workers)
        return 0
    if args.command in COMMAND_KINDS:
        return _run_scan(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_scan(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run a functions or classes scan.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    if args.max_depth < 0:
        logger.warning(f"Invalid max depth (max_depth={args.max_depth})")
        stderr.write("max-depth must be >= 0\n")
        return 2

    kind = COMMAND_KINDS[args.command]
    request = ScanRequest(root_path=args.path, max_depth=args.max_depth)
    try:
        result = Scanner(max_workers=args.workers).scan(request=request, kind=kind)
    except FileReadError as exc:
        logger.warning(f"Failed to read file (path={args.path} error={exc})")
        stderr.write(f"Failed to read file: {exc}\n")
        return 2

    _write_errors(errors=result.errors, stderr=stderr)
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if args.format == "table":
        _write_table(
            records=result.records, root_path=Path(args.path), console=console
        )
    elif result.records:
        console.print(
            render_records(records=result.records, output_format=args.format),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    elif args.format == "json":
        console.print("[]", markup=False, highlight=False)
    return 0


def _write_errors(errors: list[ScanError], stderr: TextIO) -> None:
    """Write skipped-file errors to stderr.

    Args:
        errors: Recoverable scan errors.
        stderr: Standard error stream.
    """
    for error in errors:
        stderr.write(f"scan_error: {error.file_path}: {error.message}\n")


def _write_table(
    records: list[SymbolRecord], root_path: Path, console: Console
) -> None:
    """Write records as one table per file.

    Args:
        records: Scan records.
        root_path: Root path used for the scan.
        console: Output console.
    """
    records_by_file: dict[str, list[SymbolRecord]] = {}
    for record in records:
        records_by_file.setdefault(record.file, []).append(record)

    base = root_path.resolve()
    if base.is_file():
        base = base.parent
    for file_path in sorted(records_by_file):
        console.rule(f"{base / file_path}", style=Style(color="cyan"), characters="-")
        table = Table(show_header=True, expand=True)
        table.add_column("kind", ratio=1, overflow="fold")
        table.add_column("name", ratio=4, overflow="fold")
        table.add_column("line", ratio=1, justify="right", overflow="fold")
        for record in records_by_file[file_path]:
            table.add_row(record.kind, record.name, str(record.line))
        console.print(table)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
