"""
Enums for the Binance tool surface.

This module defines the standardized enum values used throughout the server.
These enums are the vocabulary shared by the registry, the dispatcher and the
configuration layer.

"""

from __future__ import annotations

import enum

# =============================================================================
# TOOL ENUMS
# =============================================================================


class ToolName(str, enum.Enum):
    """
    Every tool the server knows how to dispatch.

    Declaration order is the order tools are listed to clients.
    """

    GET_ACCOUNT_INFO = "get_account_info"
    GET_TICKER_PRICE = "get_ticker_price"
    GET_TICKER_24HR = "get_ticker_24hr"
    GET_ORDER_BOOK = "get_order_book"
    GET_RECENT_TRADES = "get_recent_trades"
    PLACE_ORDER = "place_order"
    CANCEL_ORDER = "cancel_order"
    GET_OPEN_ORDERS = "get_open_orders"
    GET_ORDER_HISTORY = "get_order_history"
    GET_KLINES = "get_klines"

    @property
    def requires_auth(self) -> bool:
        """Check if the tool hits a signed endpoint."""
        return self in _AUTHENTICATED_TOOLS


_AUTHENTICATED_TOOLS = frozenset(
    {
        ToolName.GET_ACCOUNT_INFO,
        ToolName.PLACE_ORDER,
        ToolName.CANCEL_ORDER,
        ToolName.GET_OPEN_ORDERS,
        ToolName.GET_ORDER_HISTORY,
    }
)


# =============================================================================
# SERVER ENUMS
# =============================================================================


class ServerVariant(str, enum.Enum):
    """
    Which tool set the server exposes.

    PUBLIC serves market data only and never needs credentials.
    AUTHENTICATED serves the full set and refuses to start the client
    without a credential pair.
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"

    @property
    def requires_credentials(self) -> bool:
        return self is ServerVariant.AUTHENTICATED

    def exposes(self, tool: ToolName) -> bool:
        """Check if a tool belongs to this variant's tool set."""
        return self.requires_credentials or not tool.requires_auth


class ClientState(str, enum.Enum):
    """Lifecycle of the shared exchange client handle."""

    UNINITIALIZED = "uninitialized"  # No client, next call will try to build one
    INITIALIZING = "initializing"  # A build is in flight, callers wait on it
    READY = "ready"  # Client built, reused until shutdown
