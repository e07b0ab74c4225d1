from enum import Enum
from typing import Optional, Union

from pydantic import field_validator

from openaikit.schema.common import ObjectKind, Parameters, Response, Usage, clamp


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(Response):
    """A single message in a conversation."""
    role: ChatRole
    content: Optional[str]
    name: Optional[str] = None


class ChatDelta(Response):
    """Incremental message fragment carried by a streaming chunk."""
    role: Optional[ChatRole] = None
    content: Optional[str] = None


class ChatParameters(Parameters):
    """Parameters for POST /chat/completions. Clamps match CompletionParameters."""
    model: str = "gpt-3.5-turbo"
    messages: list[ChatMessage]
    temperature: float = 1.0
    top_p: float = 1.0
    n: int = 1
    stop: Optional[Union[str, list[str]]] = None
    max_tokens: Optional[int] = None
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    logit_bias: Optional[dict[str, int]] = None
    user: Optional[str] = None

    @field_validator("temperature")
    @classmethod
    def _clamp_temperature(cls, v: float) -> float:
        return clamp(v, 0.0, 2.0)

    @field_validator("top_p")
    @classmethod
    def _clamp_top_p(cls, v: float) -> float:
        return clamp(v, 0.0, 1.0)

    @field_validator("presence_penalty", "frequency_penalty")
    @classmethod
    def _clamp_penalty(cls, v: float) -> float:
        return clamp(v, -2.0, 2.0)

    @field_validator("n")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        return max(1, v)


class ChatChoice(Response):
    index: int
    message: Optional[ChatMessage] = None
    delta: Optional[ChatDelta] = None
    finish_reason: Optional[str] = None


class ChatResponse(Response):
    """
    Result of a chat completion.

    Non-streaming replies carry `message` and `usage`. Streaming chunks
    (object == chat.completion.chunk) carry `delta` instead, and the last
    one is marked by a non-null finish_reason.
    """
    id: str
    object: ObjectKind
    created: int
    model: str
    choices: list[ChatChoice]
    usage: Optional[Usage] = None

    @property
    def is_final(self) -> bool:
        return any(choice.finish_reason is not None for choice in self.choices)
