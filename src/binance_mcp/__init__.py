"""Binance REST API exposed as MCP tools."""

from src.binance_mcp.tools import ToolDispatcher, ToolRegistry

__all__ = ["ToolDispatcher", "ToolRegistry"]
