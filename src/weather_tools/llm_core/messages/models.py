"""Provider-agnostic message models for the conversation of a single run."""

from pydantic import BaseModel
from abc import ABC
from typing import Optional, List, Any, Dict


class BaseMessage(ABC, BaseModel):
    """Base model for messages exchanged with an LLM.

    Attributes:
        author: Role associated with the message.
        content: Text payload of the message.
    """

    author: str
    content: str

    def to_openai(self) -> Dict[str, Any]:
        """Render the message as an OpenAI chat message dictionary."""
        return {"role": self.author, "content": self.content}


class SystemMessage(BaseMessage):
    """Message authored by the system to steer behavior."""

    author: str = "system"


class UserMessage(BaseMessage):
    """Message authored by an end user."""

    author: str = "user"


class AssistantMessage(BaseMessage):
    """Message authored by the assistant, optionally requesting tool calls."""

    author: str = "assistant"
    tool_calls: Optional[List[Any]] = None

    def to_openai(self) -> Dict[str, Any]:
        message = super().to_openai()
        if self.tool_calls:
            message["tool_calls"] = self.tool_calls
        return message


class ToolMessage(BaseMessage):
    """Result of one tool call, correlated to the call by ``tool_call_id``."""

    author: str = "tool"
    tool_call_id: str
    name: str

    def to_openai(self) -> Dict[str, Any]:
        return {"role": "tool", "tool_call_id": self.tool_call_id, "content": self.content}
