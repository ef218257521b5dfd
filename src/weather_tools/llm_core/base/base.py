"""Core abstractions shared by LLM provider implementations."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

from ..messages import BaseMessage
from ..tools.models import ToolCallResult

ProviderResT = TypeVar("ProviderResT")


class ConversationState(str, Enum):
    """Where a tool-calling exchange currently stands.

    The exchange starts out waiting for the model's tool calls to be resolved and
    ends completed, either because the model asked for no tools or because the
    tool results were sent back and answered.
    """

    AWAITING_TOOL_RESOLUTION = "awaiting_tool_resolution"
    COMPLETED = "completed"


class ChatResult(BaseModel, Generic[ProviderResT]):
    """Normalized chat output returned by provider implementations.

    Attributes:
        content: Text content to show the user.
        history: Conversation history in provider-agnostic format.
        raw: Provider-specific response payload of the last round trip.
        state: Final state of the exchange.
        tool_results: Results of the tool calls resolved during the exchange, in call order.
    """

    content: str
    history: List[BaseMessage]
    raw: ProviderResT
    state: ConversationState = ConversationState.COMPLETED
    tool_results: List[ToolCallResult] = Field(default_factory=list)


class GenericLLM(ABC, Generic[ProviderResT]):
    """Abstract base class for LLM implementations.

    Implementations return provider-specific data via ``ChatResult.raw`` while keeping
    ``ChatResult.content`` and ``ChatResult.history`` consistent for consumers.
    """

    @abstractmethod
    async def ask(self, prompt: str) -> ChatResult[ProviderResT]:
        """Answer a single prompt, resolving any tool calls the model makes.

        Args:
            prompt: The user's input.

        Returns:
            The normalized result of the exchange.
        """
