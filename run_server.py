#!/usr/bin/env python3
"""Run the Binance MCP server on stdio."""

from src.binance_mcp.service.server import main

if __name__ == "__main__":
    main()
