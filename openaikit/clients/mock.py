"""
MockOpenAI - canned implementation of OpenAIProtocol.

Returns fixed responses from JSON fixtures shipped with the package so
contract and parameter behaviour can be tested without a network.
Streaming operations replay canned SSE lines through the real decoder.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import AsyncIterator, Iterable

from openaikit.errors import OpenAIKitError
from openaikit.schema import (
    ChatParameters,
    ChatResponse,
    CompletionParameters,
    CompletionResponse,
    ContentPolicyParameters,
    ContentPolicyResponse,
    DeleteObject,
    EmbeddingsParameters,
    EmbeddingsResponse,
    File,
    FileContent,
    FileStatus,
    ImageEditParameters,
    ImageParameters,
    ImageResponse,
    ImageVariationParameters,
    ListFilesResponse,
    ListModelResponse,
    Model,
    ObjectKind,
    TranscriptionParameters,
    TranscriptionResponse,
    UploadFileParameters,
)
from openaikit.streaming import decode_event_stream

# Upload timestamp reported for files created through upload_file().
UPLOAD_CREATED_AT = 1669599635


class MockOpenAIError(OpenAIKitError):
    """Client-side validation error raised by MockOpenAI."""
    pass


class InvalidPromptError(MockOpenAIError):
    """Image request with an empty prompt (the real API rejects these)."""
    pass


@lru_cache(maxsize=None)
def load_fixture(name: str) -> dict:
    """Load fixtures/<name>.json. Cached; callers must not mutate the result."""
    path = resources.files("openaikit.clients") / "fixtures" / f"{name}.json"
    return json.loads(path.read_text(encoding="utf-8"))


async def _replay(lines: Iterable[str]) -> AsyncIterator[str]:
    for line in lines:
        yield line


def _select_image_fixture(params: ImageParameters) -> dict:
    """
    Pick the canned image reply for a request.

    Multi-image requests use the smallest canned batch that covers `n`
    (trimmed to `n`); single-image requests are keyed by the `user` tag.
    """
    fixtures = load_fixture("images")
    if params.n > 1:
        sizes = sorted(int(key) for key in fixtures["batches"])
        size = next((s for s in sizes if s >= params.n), sizes[-1])
        batch = fixtures["batches"][str(size)]
        return {"created": batch["created"], "data": batch["data"][:params.n]}
    return fixtures["by_user"].get(params.user or "", fixtures["default"])


class MockOpenAI:
    """
    Canned implementation of OpenAIProtocol.

    Holds no state: every call validates a fresh response from the
    read-only fixtures, so instances are safe to share.
    """

    # ── Models ──────────────────────────────────────────────────────

    async def list_models(self) -> ListModelResponse:
        return ListModelResponse.model_validate(load_fixture("models")["list"])

    async def retrieve_model(self, model_id: str) -> Model:
        return Model.model_validate({**load_fixture("models")["model"], "id": model_id})

    # ── Completions & chat ──────────────────────────────────────────

    async def generate_completion(self, params: CompletionParameters) -> CompletionResponse:
        return CompletionResponse.model_validate(load_fixture("completion")["response"])

    def generate_completion_streaming(
        self, params: CompletionParameters
    ) -> AsyncIterator[CompletionResponse]:
        return decode_event_stream(_replay(load_fixture("completion")["stream"]), CompletionResponse)

    async def generate_chat_completion(self, params: ChatParameters) -> ChatResponse:
        return ChatResponse.model_validate(load_fixture("chat")["response"])

    def generate_chat_completion_streaming(
        self, params: ChatParameters
    ) -> AsyncIterator[ChatResponse]:
        return decode_event_stream(_replay(load_fixture("chat")["stream"]), ChatResponse)

    # ── Images ──────────────────────────────────────────────────────

    async def create_image(self, params: ImageParameters) -> ImageResponse:
        if not params.prompt:
            raise InvalidPromptError("Image prompt must not be empty")
        return ImageResponse.model_validate(_select_image_fixture(params))

    async def generate_image_edits(self, params: ImageEditParameters) -> ImageResponse:
        if not params.prompt:
            raise InvalidPromptError("Image edit prompt must not be empty")
        return ImageResponse.model_validate(load_fixture("images")["default"])

    async def generate_image_variations(
        self, params: ImageVariationParameters
    ) -> ImageResponse:
        return ImageResponse.model_validate(load_fixture("images")["default"])

    # ── Embeddings ──────────────────────────────────────────────────

    async def create_embeddings(self, params: EmbeddingsParameters) -> EmbeddingsResponse:
        return EmbeddingsResponse.model_validate(load_fixture("embeddings"))

    # ── Audio ───────────────────────────────────────────────────────

    async def create_transcription(
        self, params: TranscriptionParameters
    ) -> TranscriptionResponse:
        return TranscriptionResponse.model_validate(load_fixture("audio")["transcription"])

    async def create_translation(
        self, params: TranscriptionParameters
    ) -> TranscriptionResponse:
        return TranscriptionResponse.model_validate(load_fixture("audio")["translation"])

    # ── Files ───────────────────────────────────────────────────────

    async def list_files(self) -> ListFilesResponse:
        return ListFilesResponse.model_validate(load_fixture("files")["list"])

    async def upload_file(self, params: UploadFileParameters) -> File:
        return File(
            id="file-XjGxS3KTG0uNmNOK362iJua3",
            object=ObjectKind.FILE,
            bytes=len(params.file),
            created_at=UPLOAD_CREATED_AT,
            filename=params.file_name,
            purpose=params.purpose,
            status=FileStatus.UPLOADED,
        )

    async def delete_file(self, file_id: str) -> DeleteObject:
        return DeleteObject(id=file_id, object=ObjectKind.FILE, deleted=True)

    async def retrieve_file(self, file_id: str) -> File:
        stored = load_fixture("files")["list"]["data"][0]
        return File.model_validate({**stored, "id": file_id})

    async def retrieve_file_content(self, file_id: str) -> list[FileContent]:
        return [FileContent.model_validate(line) for line in load_fixture("files")["content"]]

    # ── Fine-tunes & moderation ─────────────────────────────────────

    async def delete_model(self, model: str) -> DeleteObject:
        return DeleteObject(id=model, object=ObjectKind.MODEL, deleted=True)

    async def check_content_policy(
        self, params: ContentPolicyParameters
    ) -> ContentPolicyResponse:
        return ContentPolicyResponse.model_validate(load_fixture("moderation"))
