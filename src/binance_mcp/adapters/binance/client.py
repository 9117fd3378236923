"""
Binance REST client built on ccxt.

This module wraps the ccxt async Binance exchange and exposes one coroutine per
spot endpoint the tools use. Calls go through ccxt's implicit raw-endpoint
methods, so parameters reach Binance exactly as given and responses come back
as decoded JSON without ccxt's unified-model parsing.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import ccxt.async_support as ccxt

from src.binance_mcp.config import BinanceCredentials
from src.binance_mcp.errors import UpstreamError
from src.binance_mcp.protocols.exchange import Params

logger = logging.getLogger(__name__)


def exchange_error_message(error: Exception) -> str:
    """
    Extract Binance's own message from a ccxt error.

    ccxt formats exchange rejections as ``binance {"code":-1121,"msg":"..."}``.
    When the body carries a ``msg`` it is returned bare; anything else is
    returned as ccxt rendered it.
    """
    text = str(error)
    start = text.find("{")
    if start != -1:
        try:
            body = json.loads(text[start:])
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("msg"), str):
            return body["msg"]
    return text or type(error).__name__


class BinanceRestClient:
    """
    Binance spot REST client.

    Satisfies ExchangeClientProtocol structurally. Holds one ccxt exchange
    instance (and with it one HTTP session) for its whole lifetime.
    """

    def __init__(
        self,
        credentials: BinanceCredentials,
        timeout_ms: int = 10_000,
        exchange: ccxt.Exchange | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            credentials: API key pair and testnet flag
            timeout_ms: Per-request timeout enforced by ccxt
            exchange: Pre-built ccxt exchange, mainly for tests

        """
        self.testnet = credentials.testnet
        self.exchange = exchange or self._build_exchange(credentials, timeout_ms)

    @staticmethod
    def _build_exchange(
        credentials: BinanceCredentials, timeout_ms: int
    ) -> ccxt.Exchange:
        options: dict[str, Any] = {"timeout": timeout_ms}
        if credentials.is_configured:
            options.update(
                {"apiKey": credentials.api_key, "secret": credentials.api_secret}
            )

        exchange = ccxt.binance(options)
        if credentials.testnet:
            exchange.set_sandbox_mode(True)
        return exchange

    @staticmethod
    async def _request(
        endpoint: Callable[[dict[str, Any]], Awaitable[Any]], params: Params
    ) -> Any:
        try:
            return await endpoint(dict(params))
        except ccxt.BaseError as e:
            raise UpstreamError(exchange_error_message(e)) from e

    # Public market data

    async def ticker_price(self, params: Params) -> Any:
        return await self._request(self.exchange.public_get_ticker_price, params)

    async def ticker_24hr(self, params: Params) -> Any:
        return await self._request(self.exchange.public_get_ticker_24hr, params)

    async def order_book(self, params: Params) -> Any:
        return await self._request(self.exchange.public_get_depth, params)

    async def recent_trades(self, params: Params) -> Any:
        return await self._request(self.exchange.public_get_trades, params)

    async def klines(self, params: Params) -> Any:
        return await self._request(self.exchange.public_get_klines, params)

    # Signed endpoints

    async def account_info(self, params: Params) -> Any:
        return await self._request(self.exchange.private_get_account, params)

    async def place_order(self, params: Params) -> Any:
        return await self._request(self.exchange.private_post_order, params)

    async def cancel_order(self, params: Params) -> Any:
        return await self._request(self.exchange.private_delete_order, params)

    async def open_orders(self, params: Params) -> Any:
        return await self._request(self.exchange.private_get_openorders, params)

    async def order_history(self, params: Params) -> Any:
        return await self._request(self.exchange.private_get_allorders, params)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        try:
            await self.exchange.close()
        except Exception as e:
            logger.error(f"Error closing Binance client: {e}")
