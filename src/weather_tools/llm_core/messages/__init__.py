"""Expose provider-agnostic message model types."""

from .models import BaseMessage, UserMessage, AssistantMessage, SystemMessage, ToolMessage

__all__ = [
    "BaseMessage",
    "UserMessage",
    "AssistantMessage",
    "SystemMessage",
    "ToolMessage",
]
