"""MCP server entry points."""

from src.binance_mcp.service.server import create_dispatcher, create_server, main, serve

__all__ = ["create_dispatcher", "create_server", "main", "serve"]
