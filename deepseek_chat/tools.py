"""
Function calling schema: tool declarations, tool choice and returned tool calls
"""

import json
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .exceptions import SerializationError

FUNCTION_TYPE = "function"


class ToolFunction(BaseModel):
    """Function declaration offered to the model"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    # Arbitrary JSON schema, passed through untouched
    parameters: Optional[Dict[str, Any]] = None


class Tool(BaseModel):
    """Tool entry of a request's `tools` list"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tool_type: str = Field(FUNCTION_TYPE, alias="type")
    function: ToolFunction

    @classmethod
    def function_tool(
        cls,
        name: str,
        description: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> "Tool":
        """Shorthand for a `type="function"` tool"""
        return cls(
            tool_type=FUNCTION_TYPE,
            function=ToolFunction(name=name, description=description, parameters=parameters),
        )


class ForcedFunction(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class ForcedToolChoice(BaseModel):
    """Object form of `tool_choice` naming the function the model must call"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tool_type: str = Field(FUNCTION_TYPE, alias="type")
    function: ForcedFunction


class ToolChoice(RootModel):
    """
    `tool_choice` value.

    On the wire it is either a bare string directive ("auto", "none",
    "required") or a forced-function object. There is no discriminator key, so
    decoding tries the string shape first and falls back to the object shape.
    """
    root: Annotated[Union[str, ForcedToolChoice], Field(union_mode="left_to_right")]

    @classmethod
    def directive(cls, value: str) -> "ToolChoice":
        return cls(value)

    @classmethod
    def function(cls, name: str) -> "ToolChoice":
        return cls(ForcedToolChoice(tool_type=FUNCTION_TYPE, function=ForcedFunction(name=name)))

    @property
    def is_directive(self) -> bool:
        return isinstance(self.root, str)


class FunctionCall(BaseModel):
    """Function invocation requested by the model"""
    model_config = ConfigDict(frozen=True)

    name: str
    # JSON text, not validated against the declared parameters
    arguments: str


class ToolCall(BaseModel):
    """Tool call carried by an assistant message in a response"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    tool_type: str = Field(FUNCTION_TYPE, alias="type")
    function: FunctionCall

    def parse_arguments(self) -> Any:
        """Decode the JSON-encoded arguments string"""
        try:
            return json.loads(self.function.arguments)
        except json.JSONDecodeError as e:
            raise SerializationError(
                f"Tool call {self.id} ({self.function.name}) has malformed arguments: {e}"
            ) from e
