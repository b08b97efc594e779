"""
Async HTTP client for the chat completions endpoint
"""

import os
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .exceptions import CredentialError, SerializationError, TransportError
from .request import ChatCompletionsRequest
from .response import ChatCompletionsResponse

logger = logging.getLogger(__name__)

BASE_URL = "https://api.deepseek.com"
API_KEY_ENV = "DEEPSEEK_API_KEY"
BASE_URL_ENV = "DEEPSEEK_BASE_URL"
CHAT_COMPLETIONS_PATH = "/chat/completions"

DEEPSEEK_CHAT = "deepseek-chat"
DEEPSEEK_REASONER = "deepseek-reasoner"


def _load_api_key(api_key: Optional[str]) -> str:
    if api_key is None:
        api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise CredentialError(f"API key not provided and env `{API_KEY_ENV}` is not set")
    if not api_key.isascii():
        raise CredentialError(f"API key from `{API_KEY_ENV}` must be ASCII")
    if api_key != api_key.strip() or not api_key.isprintable():
        raise CredentialError(f"API key from `{API_KEY_ENV}` contains whitespace or control characters")
    return api_key


class Deepseek:
    """
    Chat completions client.

    The API key is read once at construction (argument first, then the
    `DEEPSEEK_API_KEY` env var) and sent as a bearer token on every request.
    A single `httpx.AsyncClient` is shared by all calls; it holds no
    per-request state, so concurrent `execute` calls are independent.

    Args:
        api_key: API key, defaults to the `DEEPSEEK_API_KEY` env var
        base_url: API root, defaults to `DEEPSEEK_BASE_URL` or https://api.deepseek.com
        transport: optional httpx transport, e.g. a mock or ASGI transport
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        api_key = _load_api_key(api_key)

        if base_url is None:
            base_url = os.getenv(BASE_URL_ENV, BASE_URL)
        self.base_url = base_url.rstrip("/")

        headers = {"Authorization": f"Bearer {api_key}"}
        self._http = httpx.AsyncClient(headers=headers, transport=transport)

        logger.debug(f"Chat completions client for {self.base_url}")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{CHAT_COMPLETIONS_PATH}"

    async def execute(self, request: ChatCompletionsRequest) -> ChatCompletionsResponse:
        """
        Send one request and parse the full reply.

        Raises:
            TransportError: network failure or non-2xx status
            SerializationError: body is not a valid chat completions response
        """
        logger.debug(
            f"POST {self.endpoint} model={request.model} messages={len(request.messages)}"
        )

        try:
            resp = await self._http.post(self.endpoint, json=request.to_payload())
        except httpx.HTTPError as e:
            logger.error(f"Request to {self.endpoint} failed: {e}")
            raise TransportError(f"Request failed: {e}") from e

        if not resp.is_success:
            logger.error(f"{self.endpoint} returned HTTP {resp.status_code}")
            raise TransportError(
                f"Request failed with HTTP {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            completion = ChatCompletionsResponse.model_validate_json(resp.content)
        except ValidationError as e:
            logger.error(f"Unexpected response body from {self.endpoint}: {e}")
            raise SerializationError(f"Could not parse chat completions response: {e}") from e

        for choice in completion.choices:
            logger.debug(f"Completion {completion.id}[{choice.index}]: finish_reason={choice.finish_reason}")
            for tc in choice.message.tool_calls or []:
                logger.info(f"Tool call: {tc.function.name}({tc.function.arguments})")

        return completion

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "Deepseek":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
