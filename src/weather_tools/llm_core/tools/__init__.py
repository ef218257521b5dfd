from .models import ToolDefinition, ToolCallRequest, ToolCallResult
from .registry import ToolRegistry
from .execution import ToolAdapter, ToolCallResolver
from .schema import SchemaValidator

__all__ = [
    "ToolDefinition",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolRegistry",
    "ToolAdapter",
    "ToolCallResolver",
    "SchemaValidator",
]
