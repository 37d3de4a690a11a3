# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Tool catalogue and request dispatch boundary.

``handle_tool_call`` is the only entry point used by the server and the CLI.
It never raises: every failure is rendered as a JSON ``{"error": ...}`` text.
"""

import json
import logging
from typing import Any, Literal

from symscan.model import DEFAULT_MAX_DEPTH, ScanRequest, SymbolKind, SymbolRecord
from symscan.scanner import Scanner

logger = logging.getLogger(__name__)

OutputFormat = Literal["text", "json"]

TOOL_KINDS: dict[str, SymbolKind] = {
    "get_functions": "function",
    "get_classes": "class",
}


def _input_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "path": {"type": "string"},
            "maxDepth": {"type": "number", "default": DEFAULT_MAX_DEPTH},
        },
        "required": ["path"],
    }


TOOLS: list[dict[str, Any]] = [
    {
        "name": "get_functions",
        "description": (
            "Get all functions in a directory. Returns one line per function "
            "with function name, file path and line number."
        ),
        "inputSchema": _input_schema(),
    },
    {
        "name": "get_classes",
        "description": (
            "Get all classes in a directory. Returns one line per class "
            "with class name, file path and line number."
        ),
        "inputSchema": _input_schema(),
    },
]


class UnknownToolError(ValueError):
    """Represent a request for a tool that is not provided."""


class ToolArgumentError(ValueError):
    """Represent missing or malformed tool arguments."""


def handle_tool_call(
    name: str,
    arguments: dict[str, Any] | None,
    output_format: OutputFormat = "text",
    scanner: Scanner | None = None,
) -> str:
    """Dispatch one tool request and render its result.

    Args:
        name: Tool name from :data:`TOOLS`.
        arguments: Tool arguments (``path`` and optional ``maxDepth``).
        output_format: ``text`` for ``<name>; <file>:<line>`` lines, ``json``
            for a list of ``{kind: name, line, file}`` objects.
        scanner: Scanner to use; a sequential one is created when omitted.

    Returns:
        Rendered records, or a JSON error descriptor.
    """
    try:
        records = call_tool(name=name, arguments=arguments, scanner=scanner)
    except Exception as exc:  # noqa: BLE001
        logger.warning(f"Tool call failed (tool={name} error={exc})")
        return render_error(str(exc))
    return render_records(records=records, output_format=output_format)


def call_tool(
    name: str, arguments: dict[str, Any] | None, scanner: Scanner | None = None
) -> list[SymbolRecord]:
    """Run a tool and return its records.

    Raises:
        UnknownToolError: If ``name`` is not a provided tool.
        ToolArgumentError: If arguments are missing or malformed.
        FileReadError: If a single-file path cannot be read.
    """
    kind = TOOL_KINDS.get(name)
    if kind is None:
        raise UnknownToolError(f"Unknown tool: {name}")
    request = parse_arguments(arguments or {})
    result = (scanner or Scanner()).scan(request=request, kind=kind)
    return result.records


def parse_arguments(arguments: dict[str, Any]) -> ScanRequest:
    """Validate tool arguments into a scan request.

    Raises:
        ToolArgumentError: If ``path`` is missing or ``maxDepth`` is not a
            non-negative integer.
    """
    path = arguments.get("path")
    if not isinstance(path, str) or not path:
        raise ToolArgumentError("Argument 'path' must be a non-empty string")

    max_depth = arguments.get("maxDepth")
    if max_depth is None:
        return ScanRequest(root_path=path, max_depth=DEFAULT_MAX_DEPTH)
    if isinstance(max_depth, bool) or not isinstance(max_depth, (int, float)):
        raise ToolArgumentError("Argument 'maxDepth' must be a number")
    if isinstance(max_depth, float) and not max_depth.is_integer():
        raise ToolArgumentError("Argument 'maxDepth' must be a whole number")
    if max_depth < 0:
        raise ToolArgumentError("Argument 'maxDepth' must be >= 0")
    return ScanRequest(root_path=path, max_depth=int(max_depth))


def render_records(records: list[SymbolRecord], output_format: OutputFormat) -> str:
    """Render records as plain text lines or a JSON list."""
    if output_format == "json":
        return json.dumps([record.to_dict() for record in records], indent=2)
    return "\n".join(record.to_text() for record in records)


def render_error(message: str) -> str:
    """Render the JSON error descriptor."""
    return json.dumps({"error": message}, indent=2)
