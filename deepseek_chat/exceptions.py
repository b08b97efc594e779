"""
Exception hierarchy for the chat completions client
"""

from typing import Optional


class DeepseekError(Exception):
    """Base class for every error raised by this package"""


class BuildError(DeepseekError, ValueError):
    """Raised when a builder is finished with missing or invalid input"""


class CredentialError(DeepseekError):
    """Raised when the API key is missing or cannot be sent as a header"""


class TransportError(DeepseekError):
    """Raised when the HTTP round trip fails or returns a non-2xx status"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class SerializationError(DeepseekError):
    """Raised when a JSON payload cannot be encoded or decoded into the models"""


class EmptyChoicesError(DeepseekError, IndexError):
    """Raised when the first choice of a response without choices is accessed"""

    def __init__(self, response_id: str):
        self.response_id = response_id
        super().__init__(f"Response {response_id} contains no choices")
