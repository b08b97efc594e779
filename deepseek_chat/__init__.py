"""
deepseek_chat: typed client for OpenAI-compatible chat completions

Builder-validated requests, parsed responses, JSON mode and tool calling.
"""

__version__ = "0.1.0"

from .client import Deepseek, DEEPSEEK_CHAT, DEEPSEEK_REASONER
from .exceptions import (
    BuildError,
    CredentialError,
    DeepseekError,
    EmptyChoicesError,
    SerializationError,
    TransportError,
)
from .models import Message, MessageBuilder, Role
from .request import ChatCompletionsRequest, ChatCompletionsRequestBuilder, StreamOptions
from .response import ChatCompletion, ChatCompletionsResponse, Usage
from .tools import FunctionCall, Tool, ToolCall, ToolChoice, ToolFunction

__all__ = [
    "Deepseek",
    "DEEPSEEK_CHAT",
    "DEEPSEEK_REASONER",
    "DeepseekError",
    "BuildError",
    "CredentialError",
    "EmptyChoicesError",
    "SerializationError",
    "TransportError",
    "Message",
    "MessageBuilder",
    "Role",
    "ChatCompletionsRequest",
    "ChatCompletionsRequestBuilder",
    "StreamOptions",
    "ChatCompletion",
    "ChatCompletionsResponse",
    "Usage",
    "Tool",
    "ToolFunction",
    "ToolChoice",
    "ToolCall",
    "FunctionCall",
    "__version__",
]
