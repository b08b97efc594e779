"""
Helper functions for threading tool calls through a conversation
"""

from typing import List, Mapping, Optional, Sequence

from .exceptions import BuildError
from .models import Message, Role
from .tools import ToolCall


def has_tool_calls(message: Message) -> bool:
    """Check if an assistant message asks for tool execution"""
    return bool(message.tool_calls)


def has_tool_result(messages: Sequence[Message]) -> bool:
    """Check if messages contain tool execution results"""
    return any(msg.role == Role.TOOL.value for msg in messages)


def get_last_user_message(messages: Sequence[Message]) -> Optional[str]:
    """Get the last user message from message history"""
    for msg in reversed(messages):
        if msg.role == Role.USER.value:
            return msg.content
    return None


def tool_result_message(tool_call: ToolCall, content: str) -> Message:
    """Build the tool-role message answering `tool_call`"""
    return (
        Message.builder()
        .role(Role.TOOL.value)
        .content(content)
        .tool_call_id(tool_call.id)
        .build()
    )


def append_tool_round(
    messages: Sequence[Message],
    assistant_message: Message,
    results: Mapping[str, str],
) -> List[Message]:
    """
    Extend a conversation with a completed tool round.

    Returns a new list made of `messages`, the assistant message that
    requested the tools, and one tool message per tool call in call order.
    `results` maps each tool call id to the tool's output.
    """
    if not has_tool_calls(assistant_message):
        raise BuildError("Assistant message has no tool calls to answer")

    missing = [tc.id for tc in assistant_message.tool_calls if tc.id not in results]
    if missing:
        raise BuildError(f"No result for tool calls: {', '.join(missing)}")

    conversation = list(messages)
    conversation.append(assistant_message)
    for tc in assistant_message.tool_calls:
        conversation.append(tool_result_message(tc, results[tc.id]))
    return conversation
