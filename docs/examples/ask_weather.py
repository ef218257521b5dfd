import asyncio
import os

from dotenv import load_dotenv
from openai import AsyncOpenAI

from weather_tools import NO_FUNCTION_CALL, WeatherAssistant, default_registry

# Load environment variables
load_dotenv()

QUESTIONS = [
    "What's the weather like in Patiala?",
    "How humid is it in Nainital and in Delhi?",
    "Tell me a joke.",
]


async def main() -> None:
    """
    Ask a few questions in a row and show which tools the model called.
    """
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        print("Error: OPENAI_API_KEY not found in environment variables.")
        return

    assistant = WeatherAssistant(
        client=AsyncOpenAI(api_key=api_key),
        model_name=os.getenv("OPENAI_MODEL", "gpt-4o"),
        registry=default_registry(),
    )

    for question in QUESTIONS:
        print(f"\nYou: {question}")
        result = await assistant.ask(question)
        for tool_result in result.tool_results:
            print(f"  [{tool_result.name} -> {tool_result.content}]")
        if result.content == NO_FUNCTION_CALL:
            print("(the model did not call a tool)")
        else:
            print(f"Assistant: {result.content}")


if __name__ == "__main__":
    asyncio.run(main())
