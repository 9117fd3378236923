"""
Exchange client protocol.

The dispatcher only depends on this structural contract. Every operation takes
the exact parameter mapping the exchange endpoint expects and returns the
decoded JSON response untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

Params = Mapping[str, Any]


@runtime_checkable
class ExchangeClientProtocol(Protocol):
    """
    Protocol for a Binance spot REST client.

    Semantic Role: Upstream gateway
    Relationships:
    - Used by: tool handlers, one operation per tool
    - Owned by: LazyExchangeClient (single instance per process)
    """

    # Public market data

    async def ticker_price(self, params: Params) -> Any: ...

    async def ticker_24hr(self, params: Params) -> Any: ...

    async def order_book(self, params: Params) -> Any: ...

    async def recent_trades(self, params: Params) -> Any: ...

    async def klines(self, params: Params) -> Any: ...

    # Signed account and trading endpoints

    async def account_info(self, params: Params) -> Any: ...

    async def place_order(self, params: Params) -> Any: ...

    async def cancel_order(self, params: Params) -> Any: ...

    async def open_orders(self, params: Params) -> Any: ...

    async def order_history(self, params: Params) -> Any: ...

    async def close(self) -> None:
        """Release network resources."""
        ...
