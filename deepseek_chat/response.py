"""
Chat completions response model
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import EmptyChoicesError
from .models import Message
from .tools import ToolCall


class Usage(BaseModel):
    """Token accounting for one request"""
    model_config = ConfigDict(frozen=True)

    completion_tokens: int
    prompt_cache_hit_tokens: int
    prompt_cache_miss_tokens: int
    prompt_tokens: int
    total_tokens: int


class ChatCompletion(BaseModel):
    """One generated reply"""
    model_config = ConfigDict(frozen=True)

    finish_reason: str
    index: int
    logprobs: Optional[Any] = None
    message: Message


class ChatCompletionsResponse(BaseModel):
    """OpenAI-compatible chat completion response"""
    model_config = ConfigDict(frozen=True)

    choices: List[ChatCompletion]
    created: int
    id: str
    model: str
    object: str
    system_fingerprint: str
    usage: Usage

    def first_choice(self) -> ChatCompletion:
        if not self.choices:
            raise EmptyChoicesError(self.id)
        return self.choices[0]

    @property
    def message(self) -> Message:
        """Message of the first choice"""
        return self.first_choice().message

    @property
    def tool_calls(self) -> List[ToolCall]:
        """Tool calls requested in the first choice, empty if none"""
        return list(self.message.tool_calls or [])
