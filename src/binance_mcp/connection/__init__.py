"""Shared exchange client lifecycle."""

from src.binance_mcp.connection.lazy import (
    ClientFactory,
    CredentialsLoader,
    LazyExchangeClient,
)

__all__ = [
    "ClientFactory",
    "CredentialsLoader",
    "LazyExchangeClient",
]
