"""Export the tool-related exception hierarchy used by registration and resolution."""

from .exceptions import (
    LLMToolError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolValidationError,
    ToolArgumentError,
)

__all__ = [
    "LLMToolError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
    "ToolArgumentError",
]
