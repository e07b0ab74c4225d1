from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from openaikit.schema.common import Parameters, Response, clamp

MIN_IMAGES: int = 1
MAX_IMAGES: int = 10


class ImageSize(str, Enum):
    SMALL = "256x256"
    MEDIUM = "512x512"
    LARGE = "1024x1024"


class ImageResponseFormat(str, Enum):
    URL = "url"
    BASE64_JSON = "b64_json"


class _ImageOptions(Parameters):
    """
    Options shared by generation, edit and variation requests.

    `n` is silently clamped to [MIN_IMAGES, MAX_IMAGES]: asking for 11
    images stores 10, asking for 0 or -1 stores 1.
    """
    n: int = 1
    size: ImageSize = ImageSize.LARGE
    response_format: ImageResponseFormat = ImageResponseFormat.URL
    user: Optional[str] = None

    @field_validator("n")
    @classmethod
    def _clamp_n(cls, v: int) -> int:
        return clamp(v, MIN_IMAGES, MAX_IMAGES)

    @property
    def number_of_images(self) -> int:
        return self.n


class ImageParameters(_ImageOptions):
    """Parameters for POST /images/generations."""
    prompt: str


class ImageEditParameters(_ImageOptions):
    """Parameters for POST /images/edits (multipart)."""
    image: bytes = Field(repr=False)
    prompt: str
    mask: Optional[bytes] = Field(default=None, repr=False)

    def form_fields(self) -> dict[str, str]:
        return _form_fields(self, exclude={"image", "mask"})


class ImageVariationParameters(_ImageOptions):
    """Parameters for POST /images/variations (multipart)."""
    image: bytes = Field(repr=False)

    def form_fields(self) -> dict[str, str]:
        return _form_fields(self, exclude={"image"})


def _form_fields(params: Parameters, exclude: set[str]) -> dict[str, str]:
    # Multipart form values travel as strings.
    data = params.model_dump(mode="json", exclude_none=True, exclude=exclude)
    return {key: str(value) for key, value in data.items()}


class ImageData(Response):
    url: Optional[str] = None
    b64_json: Optional[str] = None

    @property
    def image(self) -> str:
        """The URL or base64 payload, whichever the request asked for."""
        return self.url if self.url is not None else (self.b64_json or "")


class ImageResponse(Response):
    created: int
    data: list[ImageData]
