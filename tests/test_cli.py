import pytest
from typing import Any
from unittest.mock import MagicMock

from weather_tools import Settings, ToolArgumentError
from weather_tools import cli


def _raise_eof(prompt: str) -> str:
    raise EOFError


def test_read_prompt_trims_whitespace(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        return "  Weather in Delhi?  \n"

    monkeypatch.setattr("builtins.input", fake_input)

    assert cli.read_prompt() == "Weather in Delhi?"
    assert prompts == ["Ask me for weather: "]


def test_read_prompt_treats_eof_as_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("builtins.input", _raise_eof)

    assert cli.read_prompt() == ""


@pytest.mark.asyncio
async def test_run_returns_final_answer(mock_openai_client: Any, queue_responses, make_completion) -> None:
    recorder = queue_responses(
        make_completion(tool_calls=[("call_1", "get_weather", {"location": "Patiala"})]),
        make_completion(content="Patiala is at 10°C."),
    )
    settings = Settings(api_key="sk-test", model="gpt-4o", seed=0)

    answer = await cli.run("Patiala weather?", settings, client=mock_openai_client)

    assert answer == "Patiala is at 10°C."
    assert recorder.requests[1]["messages"][-1] == {"role": "tool", "tool_call_id": "call_1", "content": "10°C"}


def _patch_client(monkeypatch: pytest.MonkeyPatch, client: Any) -> MagicMock:
    factory = MagicMock(return_value=client)
    monkeypatch.setattr(cli, "AsyncOpenAI", factory)
    monkeypatch.setattr(cli, "load_settings", lambda: Settings(api_key=None, model="gpt-4o"))
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)
    return factory


def test_main_prints_no_function_call(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], mock_openai_client: Any, queue_responses, make_completion
) -> None:
    recorder = queue_responses(make_completion(content="Hello there"))
    factory = _patch_client(monkeypatch, mock_openai_client)
    monkeypatch.setattr("builtins.input", lambda prompt: "hello\n")

    cli.main()

    assert capsys.readouterr().out == "No function call\n"
    assert len(recorder.requests) == 1
    factory.assert_called_once_with(api_key="", base_url=None)


def test_main_propagates_malformed_arguments(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], mock_openai_client: Any, queue_responses, make_completion
) -> None:
    recorder = queue_responses(make_completion(tool_calls=[("call_1", "get_weather", "{oops")]))
    _patch_client(monkeypatch, mock_openai_client)
    monkeypatch.setattr("builtins.input", lambda prompt: "weather?")

    with pytest.raises(ToolArgumentError):
        cli.main()

    assert capsys.readouterr().out == ""
    assert len(recorder.requests) == 1
