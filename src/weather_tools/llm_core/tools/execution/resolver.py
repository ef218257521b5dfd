"""Resolution of model tool calls against the tool registry."""

from __future__ import annotations

import inspect
import json
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from ...exceptions import ToolArgumentError
from ...logger import get_logger
from ..models import ToolCallRequest, ToolCallResult, ToolDefinition
from ..registry import ToolRegistry

logger = get_logger(__name__)


class ToolCallResolver:
    """Resolves every tool call of one model response into a tool result.

    Calls are resolved one after another, in the order the model emitted them, and
    each produces exactly one ``ToolCallResult`` carrying the call's id. The first call
    that cannot be resolved raises, so either all results are produced or none are used.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        """
        Args:
            registry: Registry the tool names are looked up in.
        """
        self._registry = registry

    def resolve(self, tool_calls: Sequence[ToolCallRequest]) -> List[ToolCallResult]:
        """Resolve all tool calls of a response.

        Args:
            tool_calls: Tool calls extracted from the model response.

        Returns:
            One result per call, in call order.

        Raises:
            ToolNotFoundError: If a call names a tool that is not registered.
            ToolArgumentError: If a call's arguments cannot be decoded or fail validation.
        """
        logger.info("Resolving %d tool call(s).", len(tool_calls))
        return [self.resolve_one(tool_call) for tool_call in tool_calls]

    def resolve_one(self, tool_call: ToolCallRequest) -> ToolCallResult:
        """Decode the arguments of one call, run the tool and wrap its output."""
        logger.debug("Handling tool call: %s (ID: %s)", tool_call.name, tool_call.call_id)

        tool_def = self._registry.get(tool_call.name)
        function_args = self._decode_arguments(tool_def, tool_call)

        try:
            inspect.signature(tool_def.func).bind(**function_args)
        except TypeError as exc:
            raise self._argument_error(tool_call, f"Arguments do not match the tool signature: {exc}") from exc

        output = tool_def.func(**function_args)
        logger.info("Tool '%s' returned %r.", tool_call.name, output)
        return ToolCallResult(name=tool_call.name, content=str(output), call_id=tool_call.call_id)

    def _decode_arguments(self, tool_def: ToolDefinition, tool_call: ToolCallRequest) -> Dict[str, Any]:
        """Turn the raw arguments into validated keyword arguments for the tool.

        Raises:
            ToolArgumentError: If the arguments are not a JSON object or fail validation.
        """
        raw_args = tool_call.arguments

        if isinstance(raw_args, dict):
            parsed: Any = raw_args
        elif isinstance(raw_args, (str, bytes, bytearray)):
            try:
                parsed = json.loads(raw_args)
            except json.JSONDecodeError as exc:
                raise self._argument_error(tool_call, f"Failed to decode function arguments: {exc}") from exc
        else:
            raise self._argument_error(tool_call, f"Unsupported argument payload of type {type(raw_args).__name__}.")

        if not isinstance(parsed, dict):
            raise self._argument_error(tool_call, "Function arguments must decode to a JSON object.")

        if tool_def.args_model is None:
            return parsed

        try:
            validated = tool_def.args_model.model_validate(parsed, strict=True)
        except ValidationError as exc:
            raise self._argument_error(tool_call, f"Argument validation failed: {exc}") from exc
        return validated.model_dump()

    @staticmethod
    def _argument_error(tool_call: ToolCallRequest, msg: str) -> ToolArgumentError:
        full_msg = f"Tool '{tool_call.name}' (ID: {tool_call.call_id}): {msg}"
        logger.error(full_msg)
        return ToolArgumentError(full_msg, tool_name=tool_call.name, call_id=tool_call.call_id)
