import copy
import json
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from weather_tools import default_registry, OpenAIToolRegistry

ENV_VARS = ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "OPENAI_SEED", "WEATHER_TOOLS_LOG_LEVEL")


def build_completion(
    content: Optional[str] = None,
    tool_calls: Optional[List[Tuple[str, str, Any]]] = None,
    raw_tool_calls: Optional[List[Dict[str, Any]]] = None,
) -> ChatCompletion:
    """Build a real ChatCompletion.

    ``tool_calls`` holds ``(call_id, function_name, arguments)`` tuples. Arguments that are
    not strings are JSON-encoded. ``raw_tool_calls`` are appended as given.
    """
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    tool_calls = tool_calls or []
    if tool_calls or raw_tool_calls:
        message["tool_calls"] = [
            {
                "id": call_id,
                "type": "function",
                "function": {
                    "name": name,
                    "arguments": arguments if isinstance(arguments, str) else json.dumps(arguments),
                },
            }
            for call_id, name, arguments in tool_calls
        ] + list(raw_tool_calls or [])

    return ChatCompletion.model_validate(
        {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "created": 0,
            "model": "gpt-4o",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "tool_calls" if "tool_calls" in message else "stop",
                    "message": message,
                }
            ],
        }
    )


class RecordingCompletions:
    """Stand-in for ``client.chat.completions.create``.

    Returns the queued responses in order and keeps a deep copy of every request's kwargs,
    so later appends to the shared message list do not change what was recorded.
    """

    def __init__(self, responses: List[ChatCompletion]) -> None:
        self.responses = list(responses)
        self.requests: List[Dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> ChatCompletion:
        self.requests.append(copy.deepcopy(kwargs))
        return self.responses.pop(0)


@pytest.fixture
def mock_openai_client() -> Any:
    client = MagicMock(spec=AsyncOpenAI)
    client.chat = MagicMock()
    client.chat.completions = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def queue_responses(mock_openai_client: Any):
    """Queue completions on the mocked client and return the recorder."""

    def _queue(*responses: ChatCompletion) -> RecordingCompletions:
        recorder = RecordingCompletions(list(responses))
        mock_openai_client.chat.completions.create.side_effect = recorder.create
        return recorder

    return _queue


@pytest.fixture
def registry() -> OpenAIToolRegistry:
    return default_registry()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove the settings variables for the test and restore them afterwards.

    Setting before deleting makes monkeypatch undo any value a loaded .env file writes.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def make_completion():
    """The ``build_completion`` helper, as a fixture."""
    return build_completion
