"""
Error taxonomy for openaikit.

Every call fails with one of three kinds:
- TransportError: connection could not be made or broke mid-flight
- DecodingError: the body did not parse into the expected shape
- RemoteRejectionError: the server answered with a non-2xx status

Nothing here is retried. Errors are raised with their original cause chained.
"""

import json
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class APIErrorPayload(BaseModel):
    """The `error` object the API returns alongside a failure status."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[Union[str, int]] = None


class OpenAIKitError(Exception):
    """Base class for every error raised by openaikit."""
    pass


class TransportError(OpenAIKitError):
    """Network or connection failure."""
    pass


class IncompleteStreamError(TransportError):
    """Event stream closed before the [DONE] sentinel arrived."""
    pass


class DecodingError(OpenAIKitError):
    """Response body is malformed or does not match the expected schema."""
    pass


class RemoteRejectionError(OpenAIKitError):
    """The API rejected the request. Carries the server's error payload."""

    def __init__(self, status_code: int, error: APIErrorPayload):
        self.status_code = status_code
        self.error = error
        super().__init__(f"HTTP {status_code}: {error.message}")

    @property
    def code(self) -> Optional[Union[str, int]]:
        return self.error.code


def _payload_from_data(data: Any) -> Optional[APIErrorPayload]:
    # {"error": {"message": ...}} or {"error": "..."}
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return APIErrorPayload.model_validate(error)
    if isinstance(error, str) and error:
        return APIErrorPayload(message=error)
    return None


def parse_error_payload(status_code: int, body: Union[bytes, str]) -> APIErrorPayload:
    """Extract a readable error payload from a failed response body."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        payload = _payload_from_data(json.loads(text))
    except ValueError:
        payload = None
    if payload is not None:
        return payload
    return APIErrorPayload(message=text[:200].strip() or f"empty body (HTTP {status_code})")


def error_from_chunk(data: Any) -> Optional[RemoteRejectionError]:
    """Return a rejection if a decoded stream payload is an error object."""
    payload = _payload_from_data(data)
    if payload is None:
        return None
    # Mid-stream errors arrive after a 200 status line.
    return RemoteRejectionError(200, payload)
