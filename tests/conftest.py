"""
Shared fixtures: sample conversations and an in-process fake chat completions server.

The fake server is a FastAPI app mounted behind `httpx.ASGITransport`, so the
client exercises its real HTTP code path without touching the network.
"""

from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from deepseek_chat import Deepseek, Message

TEST_API_KEY = "sk-test-key"
TEST_BASE_URL = "https://api.test"


class FakeChatServer:
    """Records incoming requests and answers with queued replies"""

    def __init__(self):
        self.api_key = TEST_API_KEY
        self.replies: List[tuple] = []
        self.requests: List[Dict[str, Any]] = []
        self.headers: List[Dict[str, str]] = []
        self.app = FastAPI()

        @self.app.post("/chat/completions")
        async def chat_completions(request: Request):
            self.requests.append(await request.json())
            self.headers.append(dict(request.headers))
            status_code, body = self.replies.pop(0)
            if isinstance(body, str):
                return Response(content=body, status_code=status_code, media_type="application/json")
            return JSONResponse(content=body, status_code=status_code)

    def reply(self, body: Any, status_code: int = 200) -> None:
        self.replies.append((status_code, body))

    def client(self) -> Deepseek:
        return Deepseek(
            api_key=self.api_key,
            base_url=TEST_BASE_URL,
            transport=httpx.ASGITransport(app=self.app),
        )


def make_completion(
    content: Optional[str] = "4",
    tool_calls: Optional[List[Dict[str, Any]]] = None,
    finish_reason: str = "stop",
    choices: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Chat completions response body as the remote service sends it"""
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls

    if choices is None:
        choices = [{"index": 0, "finish_reason": finish_reason, "logprobs": None, "message": message}]

    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1724748618,
        "model": "deepseek-chat",
        "system_fingerprint": "fp_test",
        "choices": choices,
        "usage": {
            "completion_tokens": 1,
            "prompt_tokens": 10,
            "total_tokens": 11,
            "prompt_cache_hit_tokens": 0,
            "prompt_cache_miss_tokens": 10,
        },
    }


@pytest.fixture
def fake_server() -> FakeChatServer:
    return FakeChatServer()


@pytest.fixture
def completion_factory():
    return make_completion


@pytest.fixture
def clean_env(monkeypatch):
    """Remove client env vars so tests control them explicitly"""
    monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
    monkeypatch.delenv("DEEPSEEK_BASE_URL", raising=False)
    return monkeypatch


@pytest.fixture
def sample_messages() -> List[Message]:
    return [
        Message.builder()
        .role("system")
        .content("You are a helpful counting assistant. Be brief. Reply only with numbers.")
        .build(),
        Message.builder().role("user").content("Your objective is to count by 1. Start at 0").build(),
        Message.builder().role("assistant").content("0").build(),
        Message.builder().role("user").content("Count by 1!").build(),
    ]


@pytest.fixture
def validate_json_call() -> Dict[str, Any]:
    return {
        "id": "call_0_abc",
        "type": "function",
        "function": {"name": "validate_json", "arguments": '{"a":1}'},
    }
