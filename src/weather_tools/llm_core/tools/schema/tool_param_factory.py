import inspect
from typing import Any, get_origin, Annotated, get_args
from pydantic import Field, BaseModel, ConfigDict
from pydantic.fields import FieldInfo

from ...exceptions import ToolValidationError
from ...logger import get_logger

logger = get_logger(__name__)


class FieldTuple(BaseModel):
    """Typed ``(annotation, FieldInfo)`` pair as expected by Pydantic's ``create_model``."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    annotation: Any
    field: FieldInfo


class ToolParameterFactory:
    """Turns a single tool function parameter into a Pydantic field definition."""

    @classmethod
    def build_field_tuple(cls, param_name: str, param: inspect.Parameter, tool_name: str) -> FieldTuple:
        """Creates the field definition for one function parameter.

        Parameters without a default become required fields.

        Args:
            param_name: The name of the parameter.
            param: The inspect.Parameter object.
            tool_name: The name of the tool for error reporting.

        Returns:
            A FieldTuple containing the type annotation and Pydantic Field configuration.
        """
        description = cls._extract_description(param.annotation, param_name, tool_name)
        default = param.default if param.default is not inspect.Parameter.empty else ...

        return FieldTuple(annotation=param.annotation, field=Field(default=default, description=description))

    @staticmethod
    def _extract_description(annotation: Any, param_name: str, tool_name: str) -> str:
        """Reads the description from ``Annotated[<type>, Field(description='...')]``.

        Raises:
            ToolValidationError: If the parameter carries no Field description.
        """
        if get_origin(annotation) is Annotated:
            for metadata in get_args(annotation):
                if isinstance(metadata, FieldInfo) and metadata.description:
                    return metadata.description

        msg = (
            f"Parameter '{param_name}' in tool '{tool_name}' is missing a description.\n"
            f"Usage: {param_name}: Annotated[Type, Field(description='...')]"
        )
        logger.error(msg)
        raise ToolValidationError(msg)
