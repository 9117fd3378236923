"""Exchange client protocols."""

from src.binance_mcp.protocols.exchange import ExchangeClientProtocol, Params

__all__ = [
    "ExchangeClientProtocol",
    "Params",
]
