"""
MCP server wiring.

This module connects the tool registry and dispatcher to the MCP low-level
server and runs it over stdio. It is the only place that knows about the
transport.
"""

import asyncio
import logging
import sys
from typing import Any

from dotenv import load_dotenv
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from src.binance_mcp.config import AppConfig
from src.binance_mcp.connection.lazy import LazyExchangeClient
from src.binance_mcp.diagnostics import configure_logging
from src.binance_mcp.tools.dispatcher import ToolDispatcher
from src.binance_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def create_dispatcher(config: AppConfig) -> ToolDispatcher:
    """Build the dispatcher for the configured variant; no network access."""
    registry = ToolRegistry.for_variant(config.server.variant)
    client = LazyExchangeClient(
        variant=config.server.variant,
        timeout_ms=config.server.request_timeout_ms,
    )
    return ToolDispatcher(registry, client)


def create_server(
    dispatcher: ToolDispatcher,
    name: str = "binance-mcp-server",
    version: str = "0.1.0",
) -> Server:
    """
    Register list_tools and call_tool handlers on a new MCP server.

    Argument validation is left to the dispatcher so every failure, including
    a malformed argument bag, comes back in the same "Error: ..." envelope.
    """
    server: Server = Server(name, version=version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return dispatcher.registry.list_tools()

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any]
    ) -> types.CallToolResult:
        return await dispatcher.call_tool(name, arguments)

    return server


async def serve(config: AppConfig) -> None:
    """Run the server on stdio until the client disconnects."""
    dispatcher = create_dispatcher(config)
    server = create_server(dispatcher, config.server.name, config.server.version)

    if config.server.variant.requires_credentials and not config.credentials.is_configured:
        logger.warning(
            "Binance credentials are not configured; tool calls will fail until "
            "BINANCE_API_KEY and BINANCE_API_SECRET are set"
        )

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info(
                f"Binance MCP server started ({config.server.variant.value} tools: "
                f"{', '.join(dispatcher.registry.names())})"
            )
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await dispatcher.aclose()


def main() -> None:
    """Console entry point."""
    load_dotenv()

    try:
        config = AppConfig.from_env()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.server.log_level)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        sys.exit(0)
    except Exception:
        logger.exception("Failed to start server")
        sys.exit(1)
