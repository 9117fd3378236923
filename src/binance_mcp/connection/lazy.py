"""
Lazily built, process-wide exchange client.

This module owns the single exchange client handle shared by every tool call:
- The client is built on first use, not at startup
- Concurrent first calls share one in-flight initialization
- A failed initialization leaves no handle behind, so the next call retries
- Once built, the client is reused until shutdown
"""

import asyncio
import logging
from collections.abc import Callable

from pydantic import ValidationError

from src.binance_mcp.adapters.binance.client import BinanceRestClient
from src.binance_mcp.config import BinanceCredentials
from src.binance_mcp.enums import ClientState, ServerVariant
from src.binance_mcp.errors import ConfigurationError
from src.binance_mcp.protocols.exchange import ExchangeClientProtocol

logger = logging.getLogger(__name__)

CredentialsLoader = Callable[[], BinanceCredentials]
ClientFactory = Callable[[BinanceCredentials], ExchangeClientProtocol]

MISSING_CREDENTIALS_MESSAGE = (
    "BINANCE_API_KEY and BINANCE_API_SECRET must be set in environment variables"
)


class LazyExchangeClient:
    """
    Exactly-once holder for the exchange client.

    State machine: UNINITIALIZED -> INITIALIZING -> READY, with
    INITIALIZING -> UNINITIALIZED when initialization fails. READY is
    terminal until close().
    """

    def __init__(
        self,
        variant: ServerVariant = ServerVariant.PUBLIC,
        credentials_loader: CredentialsLoader = BinanceCredentials,
        client_factory: ClientFactory | None = None,
        timeout_ms: int = 10_000,
    ) -> None:
        """
        Initialize the holder without touching the network.

        Args:
            variant: Tool set being served; AUTHENTICATED requires credentials
            credentials_loader: Reads credentials, called on every attempt
            client_factory: Builds a client from credentials
            timeout_ms: Request timeout for the default factory

        """
        self.variant = variant
        self.credentials_loader = credentials_loader
        self.client_factory: ClientFactory = client_factory or (
            lambda credentials: BinanceRestClient(credentials, timeout_ms=timeout_ms)
        )

        self._client: ExchangeClientProtocol | None = None
        self._pending: asyncio.Task[ExchangeClientProtocol] | None = None

    @property
    def state(self) -> ClientState:
        if self._client is not None:
            return ClientState.READY
        if self._pending is not None:
            return ClientState.INITIALIZING
        return ClientState.UNINITIALIZED

    async def get(self) -> ExchangeClientProtocol:
        """
        Return the shared client, building it if needed.

        Callers arriving while a build is in flight wait for that build's
        outcome instead of starting another one.

        Raises:
            ConfigurationError: If credentials are missing or rejected

        """
        if self._client is not None:
            return self._client

        if self._pending is None:
            self._pending = asyncio.create_task(self._initialize())
            self._pending.add_done_callback(self._settle)

        # One waiter being cancelled must not cancel the shared build
        return await asyncio.shield(self._pending)

    def _settle(self, task: asyncio.Task[ExchangeClientProtocol]) -> None:
        """Record the outcome of an initialization attempt."""
        if self._pending is not task:
            # Abandoned by close(), which disposes of the result itself
            return
        self._pending = None
        if not task.cancelled() and task.exception() is None:
            self._client = task.result()

    async def _initialize(self) -> ExchangeClientProtocol:
        """Read configuration, build the client and verify credentials."""
        try:
            credentials = self.credentials_loader()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Binance configuration: {e}") from e

        if self.variant.requires_credentials and not credentials.is_configured:
            raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)

        client = self.client_factory(credentials)

        if self.variant.requires_credentials:
            try:
                await client.account_info({})
            except BaseException as e:
                # Cancellation during the check must release the session too
                await client.close()
                if isinstance(e, Exception):
                    raise ConfigurationError(
                        f"Failed to authenticate with Binance: {e}"
                    ) from e
                raise

        network = "testnet" if credentials.testnet else "mainnet"
        logger.info(f"Successfully connected to Binance API ({network})")
        return client

    async def close(self) -> None:
        """Cancel any in-flight build, wait for it to unwind and close the client."""
        pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()
            await asyncio.wait({pending})
            if not pending.cancelled() and pending.exception() is None:
                await pending.result().close()

        if self._client is not None:
            client, self._client = self._client, None
            await client.close()
