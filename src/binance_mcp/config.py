"""
Binance MCP server configuration using Pydantic Settings.

This module provides configuration management for the server, allowing
environment-based configuration with type validation and defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.binance_mcp.enums import ServerVariant


class BinanceCredentials(BaseSettings):
    """Exchange credentials and endpoint selection."""

    model_config = SettingsConfigDict(env_prefix="BINANCE_")

    api_key: str = Field(default="", description="Binance API key")
    api_secret: str = Field(default="", description="Binance API secret")
    testnet: bool = Field(
        default=False,
        description="Route requests to the spot testnet instead of production",
    )

    @property
    def is_configured(self) -> bool:
        """Check if both halves of the credential pair are present."""
        return bool(self.api_key and self.api_secret)


class ServerConfig(BaseSettings):
    """MCP server settings."""

    model_config = SettingsConfigDict(env_prefix="BINANCE_MCP_")

    name: str = "binance-mcp-server"
    version: str = "0.1.0"
    variant: ServerVariant = Field(
        default=ServerVariant.PUBLIC,
        description="Tool set to expose (public market data or full trading)",
    )

    # Passed to the exchange client, which enforces it per request
    request_timeout_ms: int = Field(
        default=10_000,
        ge=1_000,
        le=120_000,
        description="Upstream request timeout in milliseconds",
    )

    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )


class AppConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="BINANCE_MCP_APP_")

    credentials: BinanceCredentials = Field(default_factory=BinanceCredentials)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured AppConfig instance

        """
        return cls(
            credentials=BinanceCredentials(),
            server=ServerConfig(),
        )
