"""
MCP Server - stdio transport for the npm package tools.

Usage:
    npm-package-info-mcp
    python -m npm_package_info

Environment Variables:
    MCP_SERVER_NAME: Server name (default: npm-package-info-server)
    NPM_COMMAND: Registry tool executable (default: npm)
    LOG_LEVEL: Log level written to stderr (default: INFO)
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .core.config import Settings, get_settings
from .core.logging import get_logger, setup_logging
from .dispatcher import Dispatcher
from .tools import build_registry

logger = get_logger(__name__)


def create_server(
    dispatcher: Optional[Dispatcher] = None,
    settings: Optional[Settings] = None,
) -> Server:
    """Build the MCP server and wire tools/list and tools/call to the dispatcher."""
    settings = settings or get_settings()
    dispatcher = dispatcher or Dispatcher(build_registry(settings=settings))

    server = Server(settings.mcp_server_name, version=settings.mcp_server_version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [descriptor.to_mcp() for descriptor in dispatcher.registry.list_tools()]

    # Arguments are validated by each tool so failures keep the text envelope.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        result = await dispatcher.dispatch(name, arguments)
        return result.to_mcp()

    return server


async def serve(settings: Optional[Settings] = None) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    settings = settings or get_settings()
    server = create_server(settings=settings)

    async with stdio_server() as (read_stream, write_stream):
        logger.info(
            "NPM Package Info MCP server running on stdio",
            server=settings.mcp_server_name,
            version=settings.mcp_server_version,
        )
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, json_output=settings.log_json)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        # asyncio.run cancels serve(), which closes the stdio transport first.
        logger.info("Interrupt received, server stopped")
    return 0
