"""Runtime settings read from the environment and an optional ``.env`` file."""

import os
import warnings
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-4o"


class Settings(BaseModel):
    """
    Settings for one run of the assistant.

    Attributes:
        api_key: OpenAI API key. Missing keys are allowed; the first request fails instead.
        model: Chat model to use.
        base_url: Optional OpenAI-compatible endpoint.
        seed: Sampling seed sent with both requests.
        log_level: Level of the package logger.
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None
    seed: int = 0
    log_level: str = Field(default="WARNING")


def load_settings(env_file: Optional[str | Path] = None) -> Settings:
    """
    Build Settings from the process environment, after loading a ``.env`` file.

    Values already present in the environment win over the file. A missing file or a
    missing API key only triggers a ``UserWarning``.

    Args:
        env_file: Explicit ``.env`` path. If None, the nearest ``.env`` from the working
            directory upwards is used.

    Returns:
        The resolved settings.
    """
    path = str(env_file) if env_file is not None else find_dotenv(usecwd=True)
    if path and Path(path).is_file():
        load_dotenv(path)
    else:
        warnings.warn("No .env file found; using the process environment only.", UserWarning, stacklevel=2)

    api_key = os.getenv("OPENAI_API_KEY") or None
    if api_key is None:
        warnings.warn("OPENAI_API_KEY is not set; requests to OpenAI will fail.", UserWarning, stacklevel=2)

    return Settings(
        api_key=api_key,
        model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        base_url=os.getenv("OPENAI_BASE_URL") or None,
        seed=int(os.getenv("OPENAI_SEED", "0")),
        log_level=os.getenv("WEATHER_TOOLS_LOG_LEVEL") or "WARNING",
    )
