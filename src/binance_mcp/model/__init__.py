"""Tool argument and outcome models."""

from src.binance_mcp.model.arguments import (
    CancelOrderArguments,
    KlinesArguments,
    NoArguments,
    OpenOrdersArguments,
    OrderBookArguments,
    OrderHistoryArguments,
    PlaceOrderArguments,
    RecentTradesArguments,
    SymbolArguments,
    ToolArguments,
)
from src.binance_mcp.model.outcome import ToolFailure, ToolOutcome, ToolSuccess

__all__ = [
    "CancelOrderArguments",
    "KlinesArguments",
    "NoArguments",
    "OpenOrdersArguments",
    "OrderBookArguments",
    "OrderHistoryArguments",
    "PlaceOrderArguments",
    "RecentTradesArguments",
    "SymbolArguments",
    "ToolArguments",
    "ToolFailure",
    "ToolOutcome",
    "ToolSuccess",
]
