"""
Tool registry.

The registry is the single source of truth for what the server exposes. Each
ToolSpec ties a tool name to its description, its arguments model and its
forwarding handler; the advertised inputSchema is generated from the same
arguments model the dispatcher validates with.
"""

from typing import Any

from mcp import types
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from src.binance_mcp.enums import ServerVariant, ToolName
from src.binance_mcp.errors import UnknownToolError
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
from src.binance_mcp.tools import handlers
from src.binance_mcp.tools.handlers import Handler


class ToolSpec(BaseModel):
    """Static description of one tool."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: ToolName
    description: str
    arguments: type[ToolArguments]
    handler: Handler = Field(exclude=True)

    @property
    def requires_auth(self) -> bool:
        return self.name.requires_auth

    def input_schema(self) -> dict[str, Any]:
        return self.arguments.input_schema()

    def to_tool(self) -> types.Tool:
        """Descriptor in the protocol's shape."""
        return types.Tool(
            name=self.name.value,
            description=self.description,
            inputSchema=self.input_schema(),
        )


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=ToolName.GET_ACCOUNT_INFO,
        description="Get account information including balances and trading status",
        arguments=NoArguments,
        handler=handlers.get_account_info,
    ),
    ToolSpec(
        name=ToolName.GET_TICKER_PRICE,
        description="Get current price for a specific trading pair",
        arguments=SymbolArguments,
        handler=handlers.get_ticker_price,
    ),
    ToolSpec(
        name=ToolName.GET_TICKER_24HR,
        description="Get 24hr ticker price change statistics for a symbol",
        arguments=SymbolArguments,
        handler=handlers.get_ticker_24hr,
    ),
    ToolSpec(
        name=ToolName.GET_ORDER_BOOK,
        description="Get order book depth for a trading pair",
        arguments=OrderBookArguments,
        handler=handlers.get_order_book,
    ),
    ToolSpec(
        name=ToolName.GET_RECENT_TRADES,
        description="Get recent trades for a trading pair",
        arguments=RecentTradesArguments,
        handler=handlers.get_recent_trades,
    ),
    ToolSpec(
        name=ToolName.PLACE_ORDER,
        description="Place a new order on Binance",
        arguments=PlaceOrderArguments,
        handler=handlers.place_order,
    ),
    ToolSpec(
        name=ToolName.CANCEL_ORDER,
        description="Cancel an existing order",
        arguments=CancelOrderArguments,
        handler=handlers.cancel_order,
    ),
    ToolSpec(
        name=ToolName.GET_OPEN_ORDERS,
        description="Get all open orders for a symbol or all symbols",
        arguments=OpenOrdersArguments,
        handler=handlers.get_open_orders,
    ),
    ToolSpec(
        name=ToolName.GET_ORDER_HISTORY,
        description="Get order history for a symbol",
        arguments=OrderHistoryArguments,
        handler=handlers.get_order_history,
    ),
    ToolSpec(
        name=ToolName.GET_KLINES,
        description="Get candlestick/kline data for a symbol",
        arguments=KlinesArguments,
        handler=handlers.get_klines,
    ),
)

_unregistered = set(ToolName) - {spec.name for spec in TOOL_SPECS}
if _unregistered:
    raise RuntimeError(f"Tools without a ToolSpec: {sorted(t.value for t in _unregistered)}")


class ToolRegistry(BaseModel):
    """
    Ordered, immutable view of the tools one server variant exposes.

    Follows the settings-as-model approach: the variant IS the configuration,
    the ToolSpec table is filtered by it once.
    """

    variant: ServerVariant = ServerVariant.PUBLIC
    specs: dict[str, ToolSpec] = Field(default_factory=dict, exclude=True)
    _tools: list[types.Tool] = PrivateAttr(default_factory=list)

    model_config = {"arbitrary_types_allowed": True}

    def model_post_init(self, __context: Any) -> None:
        if not self.specs:
            self.specs.update(
                (spec.name.value, spec)
                for spec in TOOL_SPECS
                if self.variant.exposes(spec.name)
            )
        self._tools = [spec.to_tool() for spec in self.specs.values()]

    @classmethod
    def for_variant(cls, variant: ServerVariant) -> "ToolRegistry":
        return cls(variant=variant)

    def get(self, name: str) -> ToolSpec:
        """
        Get a ToolSpec by name.

        Raises:
            UnknownToolError: If the name is not served by this variant

        """
        spec = self.specs.get(name)
        if spec is None:
            raise UnknownToolError(name)
        return spec

    def has(self, name: str) -> bool:
        return name in self.specs

    def names(self) -> list[str]:
        """Tool names in declaration order."""
        return list(self.specs)

    def list_tools(self) -> list[types.Tool]:
        """Descriptors in declaration order, as returned to list_tools."""
        return list(self._tools)

    def __len__(self) -> int:
        return len(self.specs)
