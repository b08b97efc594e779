"""
Conversation data models: roles and messages
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import BuildError
from .tools import ToolCall


class Role(str, Enum):
    """Closed set of conversation participants"""
    ASSISTANT = "assistant"
    SYSTEM = "system"
    USER = "user"
    TOOL = "tool"

    @classmethod
    def parse(cls, text: Any) -> "Role":
        """Case-insensitive match against the four role names"""
        if isinstance(text, Role):
            return text
        if not isinstance(text, str):
            raise BuildError(f"Role must be a string, got {type(text).__name__}")
        try:
            return cls(text.lower())
        except ValueError:
            allowed = ", ".join(r.value for r in cls)
            raise BuildError(f"Unknown role {text!r}, expected one of: {allowed}") from None


class Message(BaseModel):
    """OpenAI-compatible message envelope"""
    model_config = ConfigDict(frozen=True)

    content: str
    role: str
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None

    @field_validator("role", mode="before")
    @classmethod
    def _canonical_role(cls, value: Any) -> str:
        return Role.parse(value).value

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, value: Any) -> Any:
        # Assistant messages that only request tool calls arrive with null content
        return "" if value is None else value

    @classmethod
    def builder(cls) -> "MessageBuilder":
        return MessageBuilder()


class MessageBuilder:
    """
    Accumulates message fields and produces an immutable `Message`.

    `content` and `role` are required. A built message never carries
    `tool_calls`; those only come back from the remote model.
    """

    def __init__(self):
        self._content: Optional[str] = None
        self._role: Optional[Role] = None
        self._name: Optional[str] = None
        self._tool_call_id: Optional[str] = None

    def content(self, content: str) -> "MessageBuilder":
        self._content = content
        return self

    def role(self, role: str) -> "MessageBuilder":
        """Set the role, raising BuildError if it is not a known role"""
        self._role = Role.parse(role)
        return self

    def name(self, name: str) -> "MessageBuilder":
        self._name = name
        return self

    def tool_call_id(self, tool_call_id: str) -> "MessageBuilder":
        """Link a tool-role message to the tool call it answers"""
        self._tool_call_id = tool_call_id
        return self

    def build(self) -> Message:
        missing = [field for field, value in (("content", self._content), ("role", self._role)) if value is None]
        if missing:
            raise BuildError(f"Cannot build message, missing required fields: {', '.join(missing)}")

        return Message(
            content=self._content,
            role=self._role.value,
            name=self._name,
            tool_calls=None,
            tool_call_id=self._tool_call_id,
        )
