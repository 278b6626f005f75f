"""MCP server exposing the food tools, served over stdio or streamable HTTP."""

import json
import logging

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from foundation_foods.api.tools import TOOLS, UnknownToolError, call_tool
from foundation_foods.containers import AppContainer

SERVER_NAME = "foundation-foods"
SERVER_VERSION = "1.0.0"

_logger = logging.getLogger(__name__)


def list_tool_specs() -> list[types.Tool]:
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_schema,
            outputSchema=tool.output_schema,
        )
        for tool in TOOLS.values()
    ]


def call_tool_as_content(
    container: AppContainer, name: str, arguments: dict[str, object] | None
) -> tuple[list[types.TextContent], dict[str, object]]:
    """Run a tool and return its JSON text rendering plus structured content.

    Tool failures are raised so the MCP server reports them as error results.
    """
    try:
        result = call_tool(container.engine, name, arguments)
    except UnknownToolError as exc:
        raise ValueError(str(exc)) from exc
    if result.is_error or not isinstance(result.content, dict):
        raise ValueError(str(result.content))
    text = types.TextContent(type="text", text=json.dumps(result.content, indent=2))
    return [text], result.content


def create_mcp_server(container: AppContainer) -> Server:
    """Build the low-level MCP server exposing the food tools."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_tool_specs()

    # Arguments are clamped by the tool layer rather than rejected by schema.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, object] | None
    ) -> tuple[list[types.TextContent], dict[str, object]]:
        return call_tool_as_content(container, name, arguments)

    return server


async def serve_stdio(container: AppContainer) -> None:
    """Serve MCP requests over stdin/stdout until the client disconnects."""
    server = create_mcp_server(container)
    _logger.info("Starting MCP server in stdio mode")
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=SERVER_VERSION,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )
