"""
MCP stdio server.

Exposes a ToolRegistry through the MCP low-level Server API: list_tools
returns the registry schemas and call_tool dispatches to the registry.
stdout belongs to the protocol; everything diagnostic goes to the log.
"""

import asyncio
import logging
import uuid
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from govcmcp.catalogue import load_catalogue
from govcmcp.commands import COMMAND_DEFS, check_catalogue_sync
from govcmcp.config import AppConfig
from govcmcp.executor import GovcExecutor
from govcmcp.health import serve_health
from govcmcp.runner import ProcessRunner
from govcmcp.search import SearchIndex
from govcmcp.tools import ToolRegistry, build_registry
from govcmcp.types import ToolCall

logger = logging.getLogger(__name__)


def create_registry(config: AppConfig) -> ToolRegistry:
    """Composition root: runner, executor, search index and tools."""
    catalogue = load_catalogue()
    check_catalogue_sync(COMMAND_DEFS, catalogue)

    executor = GovcExecutor(ProcessRunner(config.runner))
    index = SearchIndex(catalogue)
    return build_registry(executor, index, search_limit=config.server.search_limit)


def create_server(registry: ToolRegistry, name: str = "govc-mcp", version: str | None = None) -> Server:
    """Wire a registry into an MCP Server instance."""
    server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(name=schema["name"], description=schema["description"], inputSchema=schema["inputSchema"])
            for schema in registry.get_schemas()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        call = ToolCall(id=str(uuid.uuid4()), name=name, arguments=dict(arguments or {}))
        result = await registry.execute(call)
        if not result.success:
            logger.warning(f"Tool {name} failed: {result.error}")
        return [TextContent(type="text", text=result.content)]

    return server


async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def serve(config: AppConfig) -> None:
    """
    Run the MCP server on stdio until the client disconnects.

    When enabled, the liveness endpoint runs alongside on the same loop and
    is shut down when the stdio session ends.
    """
    registry = create_registry(config)
    server = create_server(registry, config.server.name, config.server.version)

    health_task = None
    if config.server.health_enabled:
        health_task = asyncio.create_task(serve_health(config.server.http_port))

    logger.info(f"{config.server.name} {config.server.version} started on stdio")
    try:
        await run_stdio(server)
    finally:
        if health_task is not None:
            health_task.cancel()
            try:
                await health_task
            except asyncio.CancelledError:
                pass
