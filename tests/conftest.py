"""Test configuration and fixtures for the entire test suite."""

import sys
from pathlib import Path

import pytest

BINANCE_ENV_VARS = (
    "BINANCE_API_KEY",
    "BINANCE_API_SECRET",
    "BINANCE_TESTNET",
    "BINANCE_MCP_VARIANT",
    "BINANCE_MCP_LOG_LEVEL",
    "BINANCE_MCP_REQUEST_TIMEOUT_MS",
)


# Add the project root to the Python path
@pytest.fixture(scope="session", autouse=True)
def setup_path() -> None:
    """Add the project root to the Python path."""
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def clean_binance_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real credentials out of every test."""
    for name in BINANCE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
