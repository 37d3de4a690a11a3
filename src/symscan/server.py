# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Stdio MCP server exposing the symbol tools."""

import logging

from fastmcp import FastMCP

from symscan.model import DEFAULT_MAX_DEPTH
from symscan.scanner import Scanner
from symscan.tools import TOOLS, handle_tool_call

logger = logging.getLogger(__name__)

SERVER_NAME = "HelperPro Code Analyzer"

TOOL_DESCRIPTIONS: dict[str, str] = {
    tool["name"]: tool["description"] for tool in TOOLS
}


def build_server(max_workers: int = 1) -> FastMCP:
    """Create the MCP server with ``get_functions`` and ``get_classes``.

    Tool names and descriptions come from :data:`symscan.tools.TOOLS`.

    Args:
        max_workers: Worker threads used per scan.

    Returns:
        Configured server instance.
    """
    scanner = Scanner(max_workers=max_workers)
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="get_functions", description=TOOL_DESCRIPTIONS["get_functions"])
    def get_functions(path: str, maxDepth: float = DEFAULT_MAX_DEPTH) -> str:
        return handle_tool_call(
            "get_functions", {"path": path, "maxDepth": maxDepth}, scanner=scanner
        )

    @mcp.tool(name="get_classes", description=TOOL_DESCRIPTIONS["get_classes"])
    def get_classes(path: str, maxDepth: float = DEFAULT_MAX_DEPTH) -> str:
        return handle_tool_call(
            "get_classes", {"path": path, "maxDepth": maxDepth}, scanner=scanner
        )

    return mcp


def run_server(max_workers: int = 1) -> None:
    """Serve the tools over stdio until the client disconnects."""
    logger.info(f"Starting MCP server (name={SERVER_NAME})")
    build_server(max_workers=max_workers).run()
