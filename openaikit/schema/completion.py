from typing import Any, Optional, Union

from pydantic import field_validator

from openaikit.schema.common import ObjectKind, Parameters, Response, Usage, clamp


class CompletionParameters(Parameters):
    """
    Parameters for POST /completions.

    Sampling fields are clamped into the ranges the API accepts:
    temperature [0, 2], top_p [0, 1], penalties [-2, 2], logprobs [0, 5],
    n and best_of at least 1.
    """
    model: str = "text-davinci-003"
    prompt: Union[str, list[str]] = "<|endoftext|>"
    suffix: Optional[str] = None
    max_tokens: int = 16
    temperature: float = 1.0
    top_p: float = 1.0
    n: int = 1
    logprobs: Optional[int] = None
    echo: bool = False
    stop: Optional[Union[str, list[str]]] = None
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    best_of: int = 1
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

    @field_validator("logprobs")
    @classmethod
    def _clamp_logprobs(cls, v: Optional[int]) -> Optional[int]:
        return clamp(v, 0, 5)

    @field_validator("n", "best_of")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        return max(1, v)


class CompletionChoice(Response):
    text: str
    index: int
    logprobs: Optional[dict[str, Any]] = None
    finish_reason: Optional[str] = None


class CompletionResponse(Response):
    """
    Result of a text completion.

    Streaming chunks share this shape; usage is only present on
    non-streaming replies and the final chunk has a finish_reason.
    """
    id: str
    object: ObjectKind
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: Optional[Usage] = None

    @property
    def is_final(self) -> bool:
        return any(choice.finish_reason is not None for choice in self.choices)
