"""Public exports for the provider-agnostic tool-calling abstractions."""

from .base import GenericLLM, ChatResult, ConversationState
from .exceptions import (
    LLMToolError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolValidationError,
    ToolArgumentError,
)
from .logger import get_logger, setup_logging
from .messages import (
    BaseMessage,
    UserMessage,
    AssistantMessage,
    SystemMessage,
    ToolMessage,
)
from .tools import (
    ToolDefinition,
    ToolCallRequest,
    ToolCallResult,
    ToolRegistry,
    ToolAdapter,
    ToolCallResolver,
    SchemaValidator,
)

__all__ = [
    "GenericLLM",
    "ChatResult",
    "ConversationState",
    "LLMToolError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
    "ToolArgumentError",
    "get_logger",
    "setup_logging",
    "BaseMessage",
    "UserMessage",
    "AssistantMessage",
    "SystemMessage",
    "ToolMessage",
    "ToolDefinition",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolRegistry",
    "ToolAdapter",
    "ToolCallResolver",
    "SchemaValidator",
]
