from enum import Enum
from typing import Optional

from pydantic import Field

from openaikit.schema.common import ObjectKind, Parameters, Response


class FileStatus(str, Enum):
    UPLOADED = "uploaded"
    PROCESSED = "processed"
    PENDING = "pending"
    ERROR = "error"
    DELETING = "deleting"
    DELETED = "deleted"


class File(Response):
    """A document stored with the API, usually fine-tune training data."""
    id: str
    object: ObjectKind
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: Optional[FileStatus] = None
    status_details: Optional[str] = None


class ListFilesResponse(Response):
    object: ObjectKind
    data: list[File]


class UploadFileParameters(Parameters):
    """Parameters for POST /files (multipart)."""
    file: bytes = Field(repr=False)
    file_name: str
    purpose: str = "fine-tune"


class FileContent(Response):
    """One prompt/completion line of a fine-tune JSONL file."""
    prompt: str
    completion: str
