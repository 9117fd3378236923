"""Tool registry, handlers and dispatcher."""

from src.binance_mcp.tools.dispatcher import ToolDispatcher
from src.binance_mcp.tools.registry import TOOL_SPECS, ToolRegistry, ToolSpec

__all__ = [
    "TOOL_SPECS",
    "ToolDispatcher",
    "ToolRegistry",
    "ToolSpec",
]
