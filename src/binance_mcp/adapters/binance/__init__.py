"""Binance spot REST adapter."""

from src.binance_mcp.adapters.binance.client import BinanceRestClient

__all__ = ["BinanceRestClient"]
