"""Test helpers for Binance MCP tests."""

import asyncio
from typing import Any
from unittest.mock import AsyncMock

from src.binance_mcp.config import BinanceCredentials
from src.binance_mcp.connection.lazy import LazyExchangeClient
from src.binance_mcp.enums import ServerVariant
from src.binance_mcp.tools.dispatcher import ToolDispatcher
from src.binance_mcp.tools.registry import ToolRegistry

TICKER_PRICE = {"symbol": "BTCUSDT", "price": "65000.01000000"}

ORDER_BOOK = {
    "lastUpdateId": 1027024,
    "bids": [["64999.99000000", "0.43100000"]],
    "asks": [["65000.01000000", "0.12000000"]],
}

KLINE = [
    1499040000000,
    "0.01634790",
    "0.80000000",
    "0.01575800",
    "0.01577100",
    "148976.11427815",
    1499644799999,
    "2434.19055334",
    308,
    "1756.87402397",
    "28.46694368",
    "0",
]

ACCOUNT = {
    "canTrade": True,
    "balances": [{"asset": "BTC", "free": "0.00100000", "locked": "0.00000000"}],
}


class MockExchangeClient:
    """
    Mock exchange client for testing without network calls.

    Mirrors the ExchangeClientProtocol surface with AsyncMocks so tests can:
    - Inspect the exact parameters forwarded upstream
    - Script responses per endpoint
    - Inject upstream failures
    """

    def __init__(self) -> None:
        """Initialize with canned Binance-shaped responses."""
        self.ticker_price = AsyncMock(return_value=TICKER_PRICE)
        self.ticker_24hr = AsyncMock(
            return_value={"symbol": "BTCUSDT", "priceChangePercent": "1.250"}
        )
        self.order_book = AsyncMock(return_value=ORDER_BOOK)
        self.recent_trades = AsyncMock(
            return_value=[{"id": 28457, "price": "65000.01", "qty": "0.01"}]
        )
        self.klines = AsyncMock(return_value=[KLINE])
        self.account_info = AsyncMock(return_value=ACCOUNT)
        self.place_order = AsyncMock(return_value={"orderId": 28, "status": "NEW"})
        self.cancel_order = AsyncMock(
            return_value={"orderId": 28, "status": "CANCELED"}
        )
        self.open_orders = AsyncMock(return_value=[])
        self.order_history = AsyncMock(return_value=[])
        self.close = AsyncMock()


class RecordingFactory:
    """Client factory that counts constructions and remembers credentials."""

    def __init__(self, client: Any | None = None) -> None:
        self.client = client or MockExchangeClient()
        self.calls: list[BinanceCredentials] = []

    def __call__(self, credentials: BinanceCredentials) -> Any:
        self.calls.append(credentials)
        return self.client

    @property
    def count(self) -> int:
        return len(self.calls)


class SwitchableCredentials:
    """Credentials loader whose answer a test can change between calls."""

    def __init__(self, api_key: str = "", api_secret: str = "") -> None:
        self.api_key = api_key
        self.api_secret = api_secret
        self.loads = 0

    def __call__(self) -> BinanceCredentials:
        self.loads += 1
        return BinanceCredentials(api_key=self.api_key, api_secret=self.api_secret)


def configured_credentials() -> BinanceCredentials:
    return BinanceCredentials(api_key="test-key", api_secret="test-secret")


def build_dispatcher(
    variant: ServerVariant = ServerVariant.PUBLIC,
    factory: RecordingFactory | None = None,
    credentials_loader: Any = configured_credentials,
) -> tuple[ToolDispatcher, RecordingFactory]:
    """Dispatcher wired to a mock client, plus the factory that builds it."""
    factory = factory or RecordingFactory()
    client = LazyExchangeClient(
        variant=variant,
        credentials_loader=credentials_loader,
        client_factory=factory,
    )
    return ToolDispatcher(ToolRegistry.for_variant(variant), client), factory


async def yield_to_loop(times: int = 3) -> None:
    """Let pending tasks make progress."""
    for _ in range(times):
        await asyncio.sleep(0)
