from typing import Optional, Any, Callable, Type
from pydantic import BaseModel, ConfigDict


class ToolDefinition(BaseModel):
    """
    Represents the definition of a tool that can be offered to an LLM.

    Attributes:
        name: The unique name of the tool, as the model will call it.
        description: A brief description of what the tool does.
        func: The callable Python function that implements the tool's logic.
        parameters: JSON schema of the tool's input parameters.
        args_model: Optional Pydantic model used to decode and type-check call arguments.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    func: Callable
    parameters: Optional[Any] = None
    args_model: Optional[Type[BaseModel]] = None
