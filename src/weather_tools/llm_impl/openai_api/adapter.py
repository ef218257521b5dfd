from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion, ChatCompletionToolParam
from typing import List, Optional, Any, Dict, Sequence, Iterable, cast

from weather_tools.llm_core.exceptions import LLMToolError, ToolNotFoundError
from weather_tools.llm_core.logger import get_logger
from weather_tools.llm_core.messages import ToolMessage
from weather_tools.llm_core.tools import ToolAdapter, ToolCallRequest, ToolCallResult

logger = get_logger(__name__)


class OpenAIToolAdapter(ToolAdapter):
    """Adapter for OpenAI chat-completion tool calls.

    Owns the outgoing message list of one exchange. Messages are only ever appended.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        messages: List[Dict[str, Any]],
        tools: Optional[Iterable[ChatCompletionToolParam]],
        seed: Optional[int] = None,
    ):
        """Initialize the OpenAI tool adapter.

        Args:
            client: The OpenAI client instance.
            model: The name of the model to use.
            messages: The conversation so far, appended to in place.
            tools: Tool declarations sent with every request.
            seed: Sampling seed sent with every request.
        """
        self.client = client
        self.model = model
        self.messages = messages
        self.tools = tools
        self.seed = seed

    async def create(self) -> ChatCompletion:
        """Send the current conversation and return the model's response."""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            # The SDK expects its TypedDict message union; plain dicts are structurally compatible.
            "messages": cast(Iterable[Any], self.messages),
        }
        if self.tools:
            kwargs["tools"] = self.tools
        if self.seed is not None:
            kwargs["seed"] = self.seed

        logger.debug("Sending %d message(s) to OpenAI model '%s'.", len(self.messages), self.model)
        return await self.client.chat.completions.create(**kwargs)

    def get_tool_calls(self, response: ChatCompletion) -> Sequence[ToolCallRequest]:
        """Extract the function tool calls of the first choice.

        Returns:
            The tool calls in the order the model emitted them, empty if there are none.

        Raises:
            ToolNotFoundError: If any call is not a function call. Such a call could not be
                answered, and the echoed assistant message would leave it without a result.
        """
        if not response.choices:
            return []

        tool_calls = response.choices[0].message.tool_calls
        if not tool_calls:
            return []

        requests = []
        for tool_call in tool_calls:
            if tool_call.type != "function":
                msg = f"Unsupported tool call '{tool_call.id}' of type '{tool_call.type}'."
                logger.error(msg)
                raise ToolNotFoundError(msg)
            requests.append(
                ToolCallRequest(
                    name=tool_call.function.name,
                    arguments=tool_call.function.arguments,
                    call_id=tool_call.id,
                )
            )
        return requests

    def record_assistant_message(self, response: ChatCompletion) -> None:
        """Append the assistant message of the first choice, tool calls included.

        Only request-side fields are kept; response-only fields such as annotations are dropped.
        """
        if not response.choices:
            return
        message = response.choices[0].message
        record: Dict[str, Any] = {"role": "assistant", "content": message.content}
        if message.tool_calls:
            record["tool_calls"] = [tool_call.model_dump(exclude_none=True) for tool_call in message.tool_calls]
        self.messages.append(record)

    def build_tool_response_message(self, result: ToolCallResult) -> Dict[str, Any]:
        """Build the ``role: tool`` message answering one tool call.

        Raises:
            LLMToolError: If the result carries no call id to correlate it with.
        """
        if not result.call_id:
            msg = f"Result of tool '{result.name}' has no call id; OpenAI cannot correlate it."
            logger.error(msg)
            raise LLMToolError(msg)
        message = ToolMessage(content=result.content, tool_call_id=result.call_id, name=result.name)
        return message.to_openai()

    async def send_tool_responses(self, tool_messages: Sequence[Dict[str, Any]]) -> ChatCompletion:
        """Append the tool messages and send the conversation back to the model.

        Args:
            tool_messages: One tool response message per tool call.

        Returns:
            The model's next response.
        """
        self.messages.extend(tool_messages)
        return await self.create()
