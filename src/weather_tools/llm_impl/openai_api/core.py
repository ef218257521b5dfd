from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion
from typing import List, Optional, Any, Dict

from weather_tools.llm_core import GenericLLM, ChatResult, ConversationState, ToolCallResolver
from weather_tools.llm_core.logger import get_logger
from weather_tools.llm_core.messages import (
    BaseMessage,
    UserMessage,
    AssistantMessage,
    SystemMessage,
    ToolMessage,
)
from weather_tools.llm_core.tools import ToolCallResult
from .adapter import OpenAIToolAdapter
from .registry import OpenAIToolRegistry

logger = get_logger(__name__)

NO_FUNCTION_CALL = "No function call"


class WeatherAssistant(GenericLLM[ChatCompletion]):
    """
    Answers one user prompt with OpenAI, letting the model call the registered tools once.

    The exchange is at most two round trips. The first request offers the tools.
    If the model calls any, every call is resolved and answered with one tool message,
    then the second request asks the model for its final answer.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model_name: str,
        registry: Optional[OpenAIToolRegistry] = None,
        seed: Optional[int] = 0,
    ):
        """
        Initializes the assistant.

        Args:
            client: The initialized AsyncOpenAI client.
            model_name: The OpenAI model to use (e.g. 'gpt-4o').
            registry: Tools offered to the model. Defaults to an empty registry.
            seed: Sampling seed sent with both requests. None omits it.
        """
        self.client: AsyncOpenAI = client
        self.model: str = model_name
        self.registry: OpenAIToolRegistry = registry if registry is not None else OpenAIToolRegistry()
        self.seed = seed
        self._resolver = ToolCallResolver(self.registry)

    async def ask(self, prompt: str) -> ChatResult[ChatCompletion]:
        """
        Run the tool-calling exchange for a single prompt.

        Args:
            prompt: The user's input.

        Returns:
            ChatResult[ChatCompletion]: ``"No function call"`` as content if the model called
            no tool, otherwise the model's final answer. ``raw`` is the last response.

        Raises:
            ToolNotFoundError: If the model calls a tool that is not registered.
            ToolArgumentError: If the arguments of a tool call are malformed. The second
                request is not sent in that case.
            openai.OpenAIError: If a request fails.
        """
        messages: List[Dict[str, Any]] = [UserMessage(content=prompt).to_openai()]
        adapter = OpenAIToolAdapter(
            client=self.client,
            model=self.model,
            messages=messages,
            tools=self.registry.tool_object,
            seed=self.seed,
        )

        state = ConversationState.AWAITING_TOOL_RESOLUTION
        response = await adapter.create()
        tool_calls = adapter.get_tool_calls(response)
        adapter.record_assistant_message(response)

        if not tool_calls:
            state = self._transition(state, ConversationState.COMPLETED, "model requested no tool call")
            return self._build_response(NO_FUNCTION_CALL, response, messages, state, [])

        results = self._resolver.resolve(tool_calls)
        tool_messages = [adapter.build_tool_response_message(result) for result in results]

        final_response = await adapter.send_tool_responses(tool_messages)
        adapter.record_assistant_message(final_response)
        state = self._transition(state, ConversationState.COMPLETED, f"{len(results)} tool result(s) answered")

        content = ""
        if final_response.choices:
            content = final_response.choices[0].message.content or ""
        return self._build_response(content, final_response, messages, state, results)

    @staticmethod
    def _transition(current: ConversationState, target: ConversationState, reason: str) -> ConversationState:
        logger.debug("Conversation %s -> %s (%s).", current.value, target.value, reason)
        return target

    @staticmethod
    def _build_response(
        content: str,
        response: ChatCompletion,
        history: List[Dict[str, Any]],
        state: ConversationState,
        results: List[ToolCallResult],
    ) -> ChatResult[ChatCompletion]:
        """Wrap the outcome of the exchange in a ChatResult."""
        return ChatResult(
            content=content,
            history=WeatherAssistant._convert_to_generic_history(history),
            raw=response,
            state=state,
            tool_results=results,
        )

    @staticmethod
    def _convert_to_generic_history(history: List[Dict[str, Any]]) -> List[BaseMessage]:
        """
        Converts OpenAI message dictionaries to generic BaseMessage history.

        Tool messages get their tool name from the assistant message that requested them.

        Args:
            history: List of OpenAI message dictionaries.

        Returns:
            List of BaseMessage objects.
        """
        generic_history: List[BaseMessage] = []
        call_names: Dict[str, str] = {}

        for msg in history:
            role = msg.get("role")
            content = msg.get("content") or ""

            if role == "user":
                generic_history.append(UserMessage(content=content))
            elif role == "system":
                generic_history.append(SystemMessage(content=content))
            elif role == "assistant":
                tool_calls = msg.get("tool_calls") or None
                for call in tool_calls or []:
                    call_names[call.get("id", "")] = call.get("function", {}).get("name", "unknown_tool")
                generic_history.append(AssistantMessage(content=content, tool_calls=tool_calls))
            elif role == "tool":
                tool_call_id = msg.get("tool_call_id", "")
                name = msg.get("name") or call_names.get(tool_call_id, "unknown_tool")
                generic_history.append(ToolMessage(content=content, tool_call_id=tool_call_id, name=name))
        return generic_history
