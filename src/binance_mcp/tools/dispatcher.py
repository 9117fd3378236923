"""
Tool dispatcher.

Routes a call_tool request to its handler and folds whatever happens into a
ToolOutcome. This is the outermost boundary for tool failures: nothing raised
below it reaches the protocol layer.
"""

import logging
from collections.abc import Mapping
from typing import Any

from mcp import types
from pydantic import ValidationError

from src.binance_mcp.connection.lazy import LazyExchangeClient
from src.binance_mcp.errors import InvalidArgumentsError, ToolError, UpstreamError
from src.binance_mcp.model.outcome import ToolFailure, ToolOutcome, ToolSuccess
from src.binance_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def describe_validation_error(error: ValidationError) -> str:
    """Condense pydantic errors into one line per offending field."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "arguments"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


class ToolDispatcher:
    """
    Dispatches tool calls against the shared exchange client.

    Order of a call:
    - Look the tool up (unknown names fail before any network activity)
    - Validate arguments, applying the model's defaults
    - Make sure the exchange client exists
    - Forward the parameters and wrap the raw response
    """

    def __init__(self, registry: ToolRegistry, client: LazyExchangeClient) -> None:
        self.registry = registry
        self.client = client

    async def call_tool(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> types.CallToolResult:
        """Invoke a tool and return the protocol envelope."""
        outcome = await self.invoke(name, arguments)
        return outcome.to_call_tool_result()

    async def invoke(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> ToolOutcome:
        """Invoke a tool and return its outcome as a value."""
        try:
            payload = await self._run(name, dict(arguments or {}))
        except ToolError as e:
            logger.warning(f"Tool {name} failed: {e}")
            return ToolFailure(message=e.message, kind=type(e).__name__)
        except Exception as e:
            logger.exception(f"Unexpected error in tool {name}")
            return ToolFailure(message=str(e) or type(e).__name__, kind=type(e).__name__)

        return ToolSuccess(payload=payload)

    async def _run(self, name: str, arguments: dict[str, Any]) -> Any:
        spec = self.registry.get(name)

        try:
            params = spec.arguments.model_validate(arguments).to_params()
        except ValidationError as e:
            raise InvalidArgumentsError(name, describe_validation_error(e)) from e

        client = await self.client.get()

        try:
            return await spec.handler(client, params)
        except ToolError:
            raise
        except Exception as e:
            raise UpstreamError(str(e) or type(e).__name__) from e

    async def aclose(self) -> None:
        """Release the exchange client."""
        await self.client.close()
