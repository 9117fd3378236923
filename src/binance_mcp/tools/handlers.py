"""
Forwarding operations, one per tool.

Each handler passes the already-validated parameter set to the matching client
operation and returns the response as is. No handler retries, caches or
reshapes anything.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from src.binance_mcp.protocols.exchange import ExchangeClientProtocol, Params

Handler = Callable[[ExchangeClientProtocol, Params], Awaitable[Any]]


async def get_account_info(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.account_info(params)


async def get_ticker_price(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.ticker_price(params)


async def get_ticker_24hr(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.ticker_24hr(params)


async def get_order_book(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.order_book(params)


async def get_recent_trades(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.recent_trades(params)


async def place_order(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.place_order(params)


async def cancel_order(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.cancel_order(params)


async def get_open_orders(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.open_orders(params)


async def get_order_history(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.order_history(params)


async def get_klines(client: ExchangeClientProtocol, params: Params) -> Any:
    return await client.klines(params)
