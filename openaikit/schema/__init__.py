"""
Parameter and response records for every API endpoint.

All records are immutable pydantic models. Parameters normalise their
numeric bounds at construction; responses ignore unknown fields.
"""

from .audio import TranscriptionFormat, TranscriptionParameters, TranscriptionResponse
from .chat import ChatChoice, ChatDelta, ChatMessage, ChatParameters, ChatResponse, ChatRole
from .common import DeleteObject, ObjectKind, Usage, clamp
from .completion import CompletionChoice, CompletionParameters, CompletionResponse
from .embeddings import Embedding, EmbeddingsParameters, EmbeddingsResponse
from .files import File, FileContent, FileStatus, ListFilesResponse, UploadFileParameters
from .images import (
    MAX_IMAGES,
    MIN_IMAGES,
    ImageData,
    ImageEditParameters,
    ImageParameters,
    ImageResponse,
    ImageResponseFormat,
    ImageSize,
    ImageVariationParameters,
)
from .models import ListModelResponse, Model
from .moderation import (
    ContentPolicyCategories,
    ContentPolicyCategoryScores,
    ContentPolicyParameters,
    ContentPolicyResponse,
    ContentPolicyResult,
)

__all__ = [
    "ChatChoice", "ChatDelta", "ChatMessage", "ChatParameters", "ChatResponse", "ChatRole",
    "CompletionChoice", "CompletionParameters", "CompletionResponse",
    "ContentPolicyCategories", "ContentPolicyCategoryScores", "ContentPolicyParameters",
    "ContentPolicyResponse", "ContentPolicyResult",
    "DeleteObject", "Embedding", "EmbeddingsParameters", "EmbeddingsResponse",
    "File", "FileContent", "FileStatus", "ListFilesResponse", "UploadFileParameters",
    "ImageData", "ImageEditParameters", "ImageParameters", "ImageResponse",
    "ImageResponseFormat", "ImageSize", "ImageVariationParameters",
    "ListModelResponse", "MAX_IMAGES", "MIN_IMAGES", "Model", "ObjectKind",
    "TranscriptionFormat", "TranscriptionParameters", "TranscriptionResponse",
    "Usage", "clamp",
]
