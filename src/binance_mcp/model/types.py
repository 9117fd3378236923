"""Literal value sets accepted by the Binance spot endpoints."""

from typing import Literal

OrderSide = Literal["BUY", "SELL"]

OrderType = Literal[
    "LIMIT",
    "MARKET",
    "STOP_LOSS",
    "STOP_LOSS_LIMIT",
    "TAKE_PROFIT",
    "TAKE_PROFIT_LIMIT",
    "LIMIT_MAKER",
]

TimeInForce = Literal["GTC", "IOC", "FOK"]

KlineInterval = Literal[
    "1m",
    "3m",
    "5m",
    "15m",
    "30m",
    "1h",
    "2h",
    "4h",
    "6h",
    "8h",
    "12h",
    "1d",
    "3d",
    "1w",
    "1M",
]

# Order types Binance requires a timeInForce for
TIME_IN_FORCE_ORDER_TYPES: frozenset[str] = frozenset(
    {"LIMIT", "STOP_LOSS_LIMIT", "TAKE_PROFIT_LIMIT"}
)
