from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ObjectKind(str, Enum):
    """Discriminator carried in the `object` field of every response."""
    LIST = "list"
    MODEL = "model"
    MODEL_PERMISSION = "model_permission"
    FILE = "file"
    EMBEDDING = "embedding"
    TEXT_COMPLETION = "text_completion"
    CHAT_COMPLETION = "chat.completion"
    CHAT_COMPLETION_CHUNK = "chat.completion.chunk"
    FINE_TUNE = "fine-tune"


class Parameters(BaseModel):
    """
    Base for request parameter records.

    Out-of-range numeric fields are clamped by validators at construction,
    never rejected. Required-looking strings (e.g. an empty prompt) are left
    for the server to reject.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_body(self) -> dict:
        """JSON request body with unset optional fields omitted."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class Response(BaseModel):
    """Base for decoded response records. Unknown fields are dropped."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Usage(Response):
    """Token accounting for a call."""
    prompt_tokens: int = Field(ge=0)
    completion_tokens: Optional[int] = Field(default=None, ge=0)
    total_tokens: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_total(self) -> "Usage":
        if self.completion_tokens is not None:
            expected = self.prompt_tokens + self.completion_tokens
            if self.total_tokens != expected:
                raise ValueError(
                    f"total_tokens {self.total_tokens} != "
                    f"prompt_tokens + completion_tokens ({expected})"
                )
        return self


class DeleteObject(Response):
    """Acknowledgement returned by delete endpoints."""
    id: str
    object: ObjectKind
    deleted: bool


def clamp(value, lower, upper):
    """Constrain value to [lower, upper]. None passes through."""
    if value is None:
        return None
    return max(lower, min(upper, value))
