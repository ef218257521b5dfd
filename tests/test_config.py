import warnings
from pathlib import Path

import pytest

from weather_tools.config import DEFAULT_MODEL, load_settings


def test_settings_from_env_file(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "OPENAI_API_KEY=sk-test\nOPENAI_MODEL=gpt-4o-mini\nOPENAI_SEED=7\nWEATHER_TOOLS_LOG_LEVEL=debug\n",
        encoding="utf-8",
    )

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        settings = load_settings(env_file)

    assert settings.api_key == "sk-test"
    assert settings.model == "gpt-4o-mini"
    assert settings.seed == 7
    assert settings.log_level == "debug"
    assert settings.base_url is None


def test_process_environment_wins_over_env_file(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_API_KEY=from-file\n", encoding="utf-8")
    clean_env.setenv("OPENAI_API_KEY", "from-env")

    settings = load_settings(env_file)

    assert settings.api_key == "from-env"


def test_missing_env_file_warns_and_continues(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("OPENAI_API_KEY", "sk-env")

    with pytest.warns(UserWarning, match="No .env file found"):
        settings = load_settings(tmp_path / "missing.env")

    assert settings.api_key == "sk-env"
    assert settings.model == DEFAULT_MODEL
    assert settings.seed == 0


def test_missing_api_key_warns(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_MODEL=gpt-4o\n", encoding="utf-8")

    with pytest.warns(UserWarning, match="OPENAI_API_KEY is not set"):
        settings = load_settings(env_file)

    assert settings.api_key is None


def test_env_file_is_found_from_working_directory(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("OPENAI_API_KEY=sk-cwd\n", encoding="utf-8")
    clean_env.chdir(tmp_path)

    settings = load_settings()

    assert settings.api_key == "sk-cwd"
