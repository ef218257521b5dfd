from typing import Any, Dict, List

from openai.types.chat import ChatCompletionToolParam

from weather_tools.llm_core.tools import ToolRegistry

_EMPTY_PARAMETERS: Dict[str, Any] = {"type": "object", "properties": {}}


class OpenAIToolRegistry(ToolRegistry):
    """
    ToolRegistry rendering its tools in the OpenAI chat-completions format.
    """

    @property
    def tool_object(self) -> List[ChatCompletionToolParam] | None:
        """
        The ``tools`` argument for ``chat.completions.create``.

        Returns:
            One ``{"type": "function", "function": {...}}`` entry per tool, in registration
            order, or None if no tools are registered.
        """
        if not self.tools:
            return None

        tools_list: List[ChatCompletionToolParam] = []
        for tool in self.tools.values():
            tools_list.append(
                {
                    "type": "function",
                    "function": {
                        "name": tool.name,
                        "description": tool.description,
                        # OpenAI expects an object schema even for tools without arguments
                        "parameters": tool.parameters or dict(_EMPTY_PARAMETERS),
                    },
                }
            )
        return tools_list
