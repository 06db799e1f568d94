"""MCP server exposing the VCS tools over stdio."""

from typing import Any

import mcp.server.stdio
import structlog
from mcp import types
from mcp.server.lowlevel import Server

from forge_ops_mcp.context import AppContext
from forge_ops_mcp.tools import TOOL_CLASSES, ToolResult, VcsTool

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

SERVER_NAME = "forge-ops-mcp"


def list_tool_definitions() -> list[types.Tool]:
    """Describe every tool with its JSON input schema."""
    return [types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema()) for tool in TOOL_CLASSES]


def build_tools(context: AppContext) -> dict[str, VcsTool]:
    """Instantiate every tool, keyed by name."""
    return {tool_class.name: tool_class(context) for tool_class in TOOL_CLASSES}


async def dispatch_tool_call(tools: dict[str, VcsTool], name: str, arguments: dict[str, Any] | None) -> ToolResult:
    """Run a tool by name. Unknown tools yield a failed envelope."""
    arguments = arguments or {}
    tool = tools.get(name)
    if tool is None:
        action = str(arguments.get("action") or "")
        return ToolResult(success=False, action=action, message="Unknown tool", error=f"Tool '{name}' not found")
    result = await tool.run(arguments)
    logger.info("Tool call finished", tool=name, action=result.action, success=result.success, code=result.code)
    return result


def build_server(context: AppContext) -> Server:
    """Build the MCP server with the list-tools and call-tool handlers registered."""
    server: Server = Server(SERVER_NAME)
    tools = build_tools(context)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return list_tool_definitions()

    # Arguments are validated by the tools so that failures come back as envelopes.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        result = await dispatch_tool_call(tools, name, arguments)
        return [types.TextContent(type="text", text=result.to_json())]

    return server


async def run_stdio(context: AppContext) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    server = build_server(context)
    logger.info("Starting MCP server over stdio", providers=context.factory.list_providers())
    try:
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await context.aclose()
        logger.info("MCP server stopped")
