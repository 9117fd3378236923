"""
Tool argument models.

Each tool validates its argument bag with one of these models. The same model
produces the JSON schema advertised to clients, so the advertised schema and
the fields a handler reads cannot drift apart.

Key design principles:
- Field names (or aliases) are Binance's own parameter names
- Defaults live on the model and are applied during validation
- to_params() yields exactly what is forwarded upstream, nothing else
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.binance_mcp.model.types import (
    TIME_IN_FORCE_ORDER_TYPES,
    KlineInterval,
    OrderSide,
    OrderType,
    TimeInForce,
)

SYMBOL_DESCRIPTION = "Trading pair symbol (e.g., BTCUSDT)"


class ToolArguments(BaseModel):
    """Base model for every tool's arguments."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    def to_params(self) -> dict[str, Any]:
        """Upstream parameter set: Binance names, absent optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON schema advertised as the tool's inputSchema."""
        return cls.model_json_schema(by_alias=True)

    @classmethod
    def required_fields(cls) -> frozenset[str]:
        """Names (as advertised) of the fields a caller must supply."""
        return frozenset(
            field.alias or name
            for name, field in cls.model_fields.items()
            if field.is_required()
        )


class NoArguments(ToolArguments):
    """Tools that take no parameters."""


class SymbolArguments(ToolArguments):
    symbol: str = Field(description=SYMBOL_DESCRIPTION)


class OrderBookArguments(SymbolArguments):
    limit: int = Field(
        default=100,
        description="Number of orders to return (5, 10, 20, 50, 100, 500, 1000, 5000)",
    )


class RecentTradesArguments(SymbolArguments):
    limit: int = Field(default=500, description="Number of trades to return (max 1000)")


class KlinesArguments(SymbolArguments):
    interval: KlineInterval = Field(default="1h", description="Kline interval")
    limit: int = Field(default=500, description="Number of klines to return (max 1000)")


class OrderHistoryArguments(SymbolArguments):
    limit: int = Field(default=500, description="Number of orders to return (max 1000)")


class OpenOrdersArguments(ToolArguments):
    symbol: str | None = Field(
        default=None,
        description="Trading pair symbol (optional, if not provided returns all open orders)",
    )


class CancelOrderArguments(SymbolArguments):
    order_id: int = Field(alias="orderId", description="Order ID to cancel")


class PlaceOrderArguments(SymbolArguments):
    """
    New order parameters.

    Quantities and prices are strings on the wire. Numbers are accepted and
    passed on in their string form; no rounding or step-size checks happen
    here, the exchange is the judge of a valid order.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    side: OrderSide = Field(description="Order side")
    order_type: OrderType = Field(alias="type", description="Order type")
    quantity: str = Field(description="Order quantity")
    price: str | None = Field(
        default=None, description="Order price (required for LIMIT orders)"
    )
    time_in_force: TimeInForce | None = Field(
        default=None,
        alias="timeInForce",
        description=(
            "Time in force (default: GTC for LIMIT, STOP_LOSS_LIMIT "
            "and TAKE_PROFIT_LIMIT orders)"
        ),
    )

    @model_validator(mode="before")
    @classmethod
    def default_time_in_force(cls, data: Any) -> Any:
        """Apply GTC to the order types that require a time in force."""
        if not isinstance(data, dict):
            return data
        has_tif = data.get("timeInForce", data.get("time_in_force")) is not None
        order_type = data.get("type", data.get("order_type"))
        if not has_tif and order_type in TIME_IN_FORCE_ORDER_TYPES:
            return {**data, "timeInForce": "GTC"}
        return data
