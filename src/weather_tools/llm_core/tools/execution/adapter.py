"""Protocol for adapting provider-specific tool handling."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from ..models import ToolCallRequest, ToolCallResult


class ToolAdapter(Protocol):
    """
    Bridges a provider's response and message formats to the generic tool round trip.
    """

    def get_tool_calls(self, response: Any) -> Sequence[ToolCallRequest]:
        """Extracts generic tool calls from a provider-specific response."""
        ...

    def record_assistant_message(self, response: Any) -> None:
        """Appends the assistant's message (including tool calls) to the conversation."""
        ...

    def build_tool_response_message(self, result: ToolCallResult) -> Any:
        """Converts a generic tool result into a provider-specific message."""
        ...

    async def send_tool_responses(self, messages: Sequence[Any]) -> Any:
        """Appends the tool messages, sends the conversation and returns the next response."""
        ...
