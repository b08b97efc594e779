"""
Chat completions request model and its builder
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import BuildError
from .models import Message
from .tools import Tool, ToolChoice

JSON_MODE = {"type": "json_object"}


class StreamOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    include_usage: Optional[bool] = None


class ChatCompletionsRequest(BaseModel):
    """
    OpenAI-compatible chat completion request.

    Optional fields left as None are dropped from the payload so the server
    applies its own defaults. Documented ranges are not checked here; the
    remote service rejects out-of-range values.
    """
    model_config = ConfigDict(frozen=True)

    messages: List[Message]
    model: str
    frequency_penalty: Optional[float] = None  # [-2.0, 2.0]
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None  # [-2.0, 2.0]
    response_format: Optional[Dict[str, Any]] = None
    stop: Optional[List[str]] = None
    stream: Optional[bool] = None
    stream_options: Optional[StreamOptions] = None
    temperature: Optional[float] = None  # [0, 2]
    top_p: Optional[float] = None  # [0, 1]
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[ToolChoice] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = None  # up to 20

    @classmethod
    def builder(cls) -> "ChatCompletionsRequestBuilder":
        return ChatCompletionsRequestBuilder()

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation with absent optional fields omitted"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ChatCompletionsRequestBuilder:
    """Collects request parameters; `messages` and `model` are required"""

    def __init__(self):
        self._fields: Dict[str, Any] = {}

    def _set(self, field: str, value: Any) -> "ChatCompletionsRequestBuilder":
        self._fields[field] = value
        return self

    def messages(self, messages: List[Message]) -> "ChatCompletionsRequestBuilder":
        """Required. Conversation in order; the list is copied"""
        return self._set("messages", list(messages))

    def model(self, model: str) -> "ChatCompletionsRequestBuilder":
        """Required. Model identifiers are case-insensitive and stored lowercase"""
        if not isinstance(model, str):
            raise BuildError(f"Model must be a string, got {type(model).__name__}")
        return self._set("model", model.lower())

    def json(self) -> "ChatCompletionsRequestBuilder":
        """Ask the model to answer with a JSON object"""
        return self._set("response_format", dict(JSON_MODE))

    def frequency_penalty(self, value: float) -> "ChatCompletionsRequestBuilder":
        """Range: [-2.0, 2.0]"""
        return self._set("frequency_penalty", value)

    def max_tokens(self, value: int) -> "ChatCompletionsRequestBuilder":
        return self._set("max_tokens", value)

    def presence_penalty(self, value: float) -> "ChatCompletionsRequestBuilder":
        """Range: [-2.0, 2.0]"""
        return self._set("presence_penalty", value)

    def response_format(self, value: Dict[str, Any]) -> "ChatCompletionsRequestBuilder":
        return self._set("response_format", value)

    def stop(self, stop: List[str]) -> "ChatCompletionsRequestBuilder":
        return self._set("stop", list(stop))

    def stream(self, stream: bool) -> "ChatCompletionsRequestBuilder":
        """If true the server answers with SSE deltas, which `execute` does not consume"""
        return self._set("stream", stream)

    def stream_options(self, options: StreamOptions) -> "ChatCompletionsRequestBuilder":
        return self._set("stream_options", options)

    def temperature(self, value: float) -> "ChatCompletionsRequestBuilder":
        """Range: [0, 2]"""
        return self._set("temperature", value)

    def top_p(self, value: float) -> "ChatCompletionsRequestBuilder":
        """Range: [0, 1]"""
        return self._set("top_p", value)

    def tools(self, tools: List[Tool]) -> "ChatCompletionsRequestBuilder":
        return self._set("tools", list(tools))

    def tool_choice(self, choice: ToolChoice) -> "ChatCompletionsRequestBuilder":
        return self._set("tool_choice", choice)

    def logprobs(self, logprobs: bool) -> "ChatCompletionsRequestBuilder":
        return self._set("logprobs", logprobs)

    def top_logprobs(self, value: int) -> "ChatCompletionsRequestBuilder":
        """Up to 20"""
        return self._set("top_logprobs", value)

    def build(self) -> ChatCompletionsRequest:
        missing = [field for field in ("messages", "model") if field not in self._fields]
        if missing:
            raise BuildError(f"Missing required fields: {', '.join(missing)}")
        try:
            return ChatCompletionsRequest(**self._fields)
        except ValidationError as e:
            raise BuildError(f"Invalid request parameters: {e}") from e
