"""Re-export base LLM interfaces and shared response models."""

from .base import GenericLLM, ChatResult, ConversationState

__all__ = [
    "GenericLLM",
    "ChatResult",
    "ConversationState",
]
