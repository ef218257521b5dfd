"""Weather Tools - a tool-calling weather assistant on top of the OpenAI chat API."""

from .config import Settings, load_settings
from .llm_core import (
    ChatResult,
    ConversationState,
    LLMToolError,
    ToolArgumentError,
    ToolNotFoundError,
    ToolCallRequest,
    ToolCallResult,
    ToolCallResolver,
    ToolDefinition,
    ToolRegistry,
)
from .llm_impl.openai_api import WeatherAssistant, OpenAIToolRegistry, NO_FUNCTION_CALL
from .lookup import LookupKind, lookup, UNKNOWN
from .weather import get_weather, get_humidity, default_registry

__all__ = [
    "Settings",
    "load_settings",
    "ChatResult",
    "ConversationState",
    "LLMToolError",
    "ToolArgumentError",
    "ToolNotFoundError",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolCallResolver",
    "ToolDefinition",
    "ToolRegistry",
    "WeatherAssistant",
    "OpenAIToolRegistry",
    "NO_FUNCTION_CALL",
    "LookupKind",
    "lookup",
    "UNKNOWN",
    "get_weather",
    "get_humidity",
    "default_registry",
]
