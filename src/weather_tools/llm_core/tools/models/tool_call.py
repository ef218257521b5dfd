"""Provider-agnostic records of a tool call and its outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ToolCallRequest:
    """A tool call extracted from an LLM response.

    ``arguments`` is whatever the provider sent, usually a JSON-encoded string.
    """

    name: str
    arguments: Any
    call_id: Optional[str] = None


@dataclass(frozen=True)
class ToolCallResult:
    """The string a tool produced for one call, tagged with the call's id."""

    name: str
    content: str
    call_id: Optional[str] = None
