"""Tool registry abstraction."""

import inspect
from abc import abstractmethod, ABC
from typing import Callable, Dict, Any, Union, Optional, cast

import jsonref  # type: ignore
from pydantic import create_model

from ..models import ToolDefinition
from ..schema import ToolParameterFactory, SchemaValidator
from ...exceptions import ToolNotFoundError, ToolRegistrationError, ToolValidationError
from ...logger import get_logger

logger = get_logger(__name__)


class ToolRegistry(ABC):
    """
    Holds the tools offered to the LLM.

    Keeps the declarations sent to the model alongside the Python callables that
    answer the model's calls, keyed by tool name.
    """

    def __init__(self) -> None:
        """Initialize an empty ToolRegistry."""
        self.tools: Dict[str, ToolDefinition] = {}

    def register(
        self,
        name_or_tool: Union[str, ToolDefinition, Callable],
        description: Optional[str] = None,
        func: Optional[Callable] = None,
        parameters: Optional[Any] = None,
    ) -> None:
        """
        Register a tool.

        Accepts a ready ``ToolDefinition``, a plain function (definition generated from
        its signature and docstring), or a name together with ``func`` and optionally an
        explicit ``parameters`` schema.

        Args:
            name_or_tool: A `ToolDefinition`, a Callable, or the name of the tool.
            description: Description override. Required with a name and explicit parameters.
            func: The callable implementing the tool. Required when a name is passed.
            parameters: Explicit JSON schema. If None, it is inferred from `func`.

        Raises:
            ToolRegistrationError: If arguments are incomplete or the tool already exists.
            ToolValidationError: If the function lacks a docstring or parameter descriptions.
        """
        if isinstance(name_or_tool, ToolDefinition):
            tool = name_or_tool
        elif callable(name_or_tool):
            tool = self._generate_tool_definition(name_or_tool, description=description)
        else:
            if func is None:
                raise ToolRegistrationError("If passing name as string, func is required.")

            if parameters is None:
                tool = self._generate_tool_definition(func, name=name_or_tool, description=description)
            else:
                if description is None:
                    raise ToolRegistrationError("If passing name and parameters, description is required.")
                tool = ToolDefinition(name=name_or_tool, description=description, func=func, parameters=parameters)

        if tool.name in self.tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.tools[tool.name] = tool
        logger.info("Registered tool '%s'.", tool.name)

    def unregister(self, tool_name: str) -> None:
        """Remove a tool from the registry.

        Raises:
            ToolNotFoundError: If the tool does not exist in the registry.
        """
        if tool_name not in self.tools:
            raise ToolNotFoundError(f"Tool '{tool_name}' not found in the registry.")
        del self.tools[tool_name]
        logger.info("Unregistered tool '%s'.", tool_name)

    def get(self, tool_name: str) -> ToolDefinition:
        """Return the definition registered under ``tool_name``.

        Raises:
            ToolNotFoundError: If no such tool is registered.
        """
        try:
            return self.tools[tool_name]
        except KeyError:
            msg = f"Tool '{tool_name}' not found in the registry."
            logger.error(msg)
            raise ToolNotFoundError(msg) from None

    def tool(self, func: Callable) -> Callable:
        """Decorator registering ``func`` as a tool and returning it unchanged."""
        self.register(func)
        return func

    @property
    @abstractmethod
    def tool_object(self) -> Any:
        """The tool declarations in the provider-specific format."""

    @property
    def implementations(self) -> Dict[str, Callable]:
        """Mapping of tool names to their callables."""
        return {name: tool.func for name, tool in self.tools.items()}

    def _generate_tool_definition(
        self, func: Callable, name: Optional[str] = None, description: Optional[str] = None
    ) -> ToolDefinition:
        """Build a ToolDefinition from a function's docstring and annotated signature.

        Args:
            func: The function to describe.
            name: Optional name override for the tool.
            description: Optional description override for the tool.

        Returns:
            The definition, including a Pydantic model for typed argument decoding.

        Raises:
            ToolValidationError: If the function is missing a docstring or parameter descriptions.
        """
        tool_name = name or func.__name__
        if description is None:
            description = self._get_docstring_from_func(func, tool_name)

        fields: Dict[str, Any] = {}
        for param_name, param in inspect.signature(func).parameters.items():
            if param_name == "self":
                continue
            ft = ToolParameterFactory.build_field_tuple(param_name=param_name, param=param, tool_name=tool_name)
            fields[param_name] = (ft.annotation, ft.field)

        args_model = create_model(f"{tool_name}Params", **cast(Dict[str, Any], fields))
        raw_schema = args_model.model_json_schema()
        SchemaValidator.assert_no_recursive_refs(raw_schema)

        # proxies=False returns plain dicts instead of JsonRef objects
        parameters_schema = jsonref.replace_refs(raw_schema, proxies=False)
        parameters_schema = SchemaValidator.sanitize_schema(parameters_schema)

        return ToolDefinition(
            name=tool_name,
            description=description,
            func=func,
            parameters=parameters_schema,
            args_model=args_model,
        )

    @staticmethod
    def _get_docstring_from_func(func: Callable, tool_name: str) -> str:
        doc = inspect.getdoc(func)
        if not doc:
            msg = f"Tool '{tool_name}' missing docstring. LLMs need a description of what the tool does."
            logger.error(msg)
            raise ToolValidationError(msg)
        return doc
