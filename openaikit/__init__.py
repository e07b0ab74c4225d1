"""
openaikit - async client for the OpenAI REST API.

    from openaikit import OpenAI, ImageParameters

    async with OpenAI() as client:
        images = await client.create_image(ImageParameters(prompt="A red apple."))
"""

from openaikit.clients import (
    InvalidPromptError,
    MockOpenAI,
    MockOpenAIError,
    OpenAI,
    OpenAIProtocol,
)
from openaikit.config import ClientConfig
from openaikit.errors import (
    APIErrorPayload,
    DecodingError,
    IncompleteStreamError,
    OpenAIKitError,
    RemoteRejectionError,
    TransportError,
)
from openaikit.schema import *  # noqa: F401,F403
from openaikit.schema import __all__ as _schema_all
from openaikit.streaming import STREAM_SENTINEL, decode_event_stream

__version__ = "0.1.0"

__all__ = [
    "APIErrorPayload",
    "ClientConfig",
    "DecodingError",
    "IncompleteStreamError",
    "InvalidPromptError",
    "MockOpenAI",
    "MockOpenAIError",
    "OpenAI",
    "OpenAIKitError",
    "OpenAIProtocol",
    "RemoteRejectionError",
    "STREAM_SENTINEL",
    "TransportError",
    "decode_event_stream",
    *_schema_all,
]
