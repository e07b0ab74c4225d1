from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from openaikit.schema.common import Parameters, Response, clamp


class TranscriptionFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class TranscriptionParameters(Parameters):
    """
    Parameters for POST /audio/transcriptions and /audio/translations.

    `file` holds the raw audio bytes; `file_name` sets the multipart
    filename, whose extension the server uses to detect the format.
    """
    file: bytes = Field(repr=False)
    file_name: str = "audio.m4a"
    model: str = "whisper-1"
    prompt: Optional[str] = None
    response_format: TranscriptionFormat = TranscriptionFormat.JSON
    temperature: float = 0.0
    language: Optional[str] = None

    @field_validator("temperature")
    @classmethod
    def _clamp_temperature(cls, v: float) -> float:
        return clamp(v, 0.0, 1.0)

    @property
    def returns_json(self) -> bool:
        return self.response_format in (
            TranscriptionFormat.JSON, TranscriptionFormat.VERBOSE_JSON
        )

    def form_fields(self) -> dict[str, str]:
        data = self.model_dump(mode="json", exclude_none=True, exclude={"file", "file_name"})
        return {key: str(value) for key, value in data.items()}


class TranscriptionResponse(Response):
    """Recognised text. Extra fields are filled only for verbose_json."""
    text: str
    language: Optional[str] = None
    duration: Optional[float] = None
    segments: Optional[list[dict[str, Any]]] = None
