"""Tool registry base class."""

from .base import ToolRegistry

__all__ = ["ToolRegistry"]
