"""The tools offered to the model and the registry that declares them."""

from typing import Annotated

from pydantic import Field

from .llm_impl.openai_api.registry import OpenAIToolRegistry
from .lookup import LookupKind, lookup


def get_weather(location: Annotated[str, Field(description="City to get the weather for")]) -> str:
    """Get weather at the given location"""
    return lookup(LookupKind.WEATHER, location)


def get_humidity(location: Annotated[str, Field(description="City to get the humidity for")]) -> str:
    """Get humidity for a city"""
    return lookup(LookupKind.HUMIDITY, location)


def default_registry() -> OpenAIToolRegistry:
    """Build a registry offering ``get_weather`` and ``get_humidity``."""
    registry = OpenAIToolRegistry()
    registry.register(get_weather)
    registry.register(get_humidity)
    return registry
