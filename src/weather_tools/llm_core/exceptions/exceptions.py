"""
Exception classes for the tool-calling layer.

Registration and schema problems are raised while the registry is built at
startup. Lookup and argument problems are raised while a model's tool calls are
resolved, before any tool result is sent back to the model.
"""


class LLMToolError(Exception):
    """Base exception for all tool-related errors."""

    pass


class ToolRegistrationError(LLMToolError):
    """Raised when there is an error registering a tool."""

    pass


class ToolNotFoundError(LLMToolError):
    """Raised when a requested tool is not found in the registry."""

    pass


class ToolValidationError(LLMToolError):
    """Raised when a tool definition is invalid."""

    pass


class ToolArgumentError(LLMToolError):
    """Raised when the arguments of a tool call cannot be decoded or fail validation.

    Attributes:
        tool_name: Name of the tool the model tried to call.
        call_id: Identifier of the offending tool call, if the provider supplied one.
    """

    def __init__(self, message: str, tool_name: str, call_id: str | None = None) -> None:
        super().__init__(message)
        self.tool_name = tool_name
        self.call_id = call_id
