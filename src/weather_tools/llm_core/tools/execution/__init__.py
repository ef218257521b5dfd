"""Tool call resolution and provider adapters."""

from .adapter import ToolAdapter
from .resolver import ToolCallResolver

__all__ = ["ToolAdapter", "ToolCallResolver"]
