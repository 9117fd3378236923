"""
Error taxonomy for tool invocations.

Every error the dispatcher can report to a caller derives from ToolError.
They never cross the protocol boundary as exceptions: the dispatcher turns
them into error envelopes.
"""


class ToolError(Exception):
    """Base class for failures reported back to the calling client."""

    @property
    def message(self) -> str:
        return str(self)


class ConfigurationError(ToolError):
    """Credentials are missing or were rejected while building the client."""


class UnknownToolError(ToolError):
    """The requested tool is not in the dispatch table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(ToolError):
    """The argument bag does not satisfy the tool's arguments model."""

    def __init__(self, tool: str, detail: str) -> None:
        super().__init__(f"Invalid arguments for {tool}: {detail}")
        self.tool = tool
        self.detail = detail


class UpstreamError(ToolError):
    """
    The exchange client call failed.

    Network faults, exchange rejections and client-side validation all fold
    into this one kind; the original exception is kept as __cause__.
    """
