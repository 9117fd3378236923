"""
Tool outcome values.

Handlers never build protocol envelopes themselves. The dispatcher folds every
invocation into a ToolSuccess or ToolFailure, and only at the boundary is the
outcome turned into the protocol's CallToolResult.
"""

import json
from typing import Any

from mcp import types
from pydantic import BaseModel, ConfigDict, Field


class ToolSuccess(BaseModel):
    """Raw upstream response, passed through unmodified."""

    model_config = ConfigDict(frozen=True)

    payload: Any = Field(description="Response value as returned by the exchange")

    @property
    def is_error(self) -> bool:
        return False

    def render(self) -> str:
        """Human-readable JSON with stable key ordering."""
        return json.dumps(self.payload, indent=2, sort_keys=True, default=str)

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.render())],
        )


class ToolFailure(BaseModel):
    """Recovered failure carrying the message shown to the caller."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="Failure message text")
    kind: str = Field(default="ToolError", description="Error class name")

    @property
    def is_error(self) -> bool:
        return True

    def render(self) -> str:
        return f"Error: {self.message}"

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.render())],
            isError=True,
        )


ToolOutcome = ToolSuccess | ToolFailure
