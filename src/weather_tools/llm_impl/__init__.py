"""Concrete LLM provider implementations and their tool registries."""

from .openai_api import WeatherAssistant, OpenAIToolRegistry

__all__ = [
    "WeatherAssistant",
    "OpenAIToolRegistry",
]
