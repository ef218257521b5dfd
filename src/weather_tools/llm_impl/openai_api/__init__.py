"""Expose the OpenAI assistant and its tool registry."""

from .core import WeatherAssistant, NO_FUNCTION_CALL
from .registry import OpenAIToolRegistry

__all__ = ["WeatherAssistant", "NO_FUNCTION_CALL", "OpenAIToolRegistry"]
