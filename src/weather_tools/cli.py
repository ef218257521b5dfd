"""Command line entry point: ask one weather question and print the answer."""

import asyncio
from typing import Optional

from openai import AsyncOpenAI

from .config import Settings, load_settings
from .llm_core.logger import get_logger, setup_logging
from .llm_impl.openai_api import WeatherAssistant
from .weather import default_registry

logger = get_logger(__name__)

PROMPT = "Ask me for weather: "


def read_prompt() -> str:
    """Read one line from stdin. EOF counts as an empty line."""
    try:
        return input(PROMPT).strip()
    except EOFError:
        return ""


async def run(prompt: str, settings: Settings, client: Optional[AsyncOpenAI] = None) -> str:
    """Answer ``prompt`` with the weather tools and return the text to print.

    Args:
        prompt: The user's question.
        settings: Model and credential settings.
        client: Client to use. Built from ``settings`` if None.
    """
    if client is None:
        # An empty key lets the request itself report the authentication failure.
        client = AsyncOpenAI(api_key=settings.api_key or "", base_url=settings.base_url)

    assistant = WeatherAssistant(
        client=client,
        model_name=settings.model,
        registry=default_registry(),
        seed=settings.seed,
    )
    result = await assistant.ask(prompt)
    logger.info("Exchange %s with %d tool result(s).", result.state.value, len(result.tool_results))
    return result.content


def main() -> None:
    """Run the assistant once. Failures propagate and end the process with a traceback."""
    settings = load_settings()
    setup_logging(level=settings.log_level)

    prompt = read_prompt()
    print(asyncio.run(run(prompt, settings)))


if __name__ == "__main__":
    main()
