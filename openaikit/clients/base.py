"""
OpenAIProtocol - defines the contract for every remote API operation.

This is the WHAT (interface), not the HOW (implementation).
See rest.py for the HTTP implementation and mock.py for the canned one.
"""

from typing import AsyncIterator, Protocol, runtime_checkable

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
    ImageEditParameters,
    ImageParameters,
    ImageResponse,
    ImageVariationParameters,
    ListFilesResponse,
    ListModelResponse,
    Model,
    TranscriptionParameters,
    TranscriptionResponse,
    UploadFileParameters,
)


@runtime_checkable
class OpenAIProtocol(Protocol):
    """
    Contract for OpenAI API clients.

    Buffered operations are coroutines that resolve once the whole body
    has been received and decoded. The two streaming operations return
    an async iterator immediately; transport and decoding errors surface
    from inside the iteration.

    All operations raise openaikit.errors.TransportError, DecodingError
    or RemoteRejectionError. Nothing is retried or cached.
    """

    # ── Models ──────────────────────────────────────────────────────

    async def list_models(self) -> ListModelResponse:
        """List the models currently available, with owner and creation time."""
        ...

    async def retrieve_model(self, model_id: str) -> Model:
        """Retrieve a single model by ID."""
        ...

    # ── Completions ─────────────────────────────────────────────────

    async def generate_completion(self, params: CompletionParameters) -> CompletionResponse:
        """Return one or more predicted completions for a prompt."""
        ...

    def generate_completion_streaming(
        self, params: CompletionParameters
    ) -> AsyncIterator[CompletionResponse]:
        """
        Stream completion chunks as they are generated.

        Yields:
            One CompletionResponse per server-sent event, in arrival order
        """
        ...

    # ── Chat ────────────────────────────────────────────────────────

    async def generate_chat_completion(self, params: ChatParameters) -> ChatResponse:
        """Complete a conversation given its message history."""
        ...

    def generate_chat_completion_streaming(
        self, params: ChatParameters
    ) -> AsyncIterator[ChatResponse]:
        """
        Stream chat completion chunks as they are generated.

        Yields:
            ChatResponse chunks carrying `delta`; the last has a finish_reason
        """
        ...

    # ── Images ──────────────────────────────────────────────────────

    async def create_image(self, params: ImageParameters) -> ImageResponse:
        """Create images from a prompt."""
        ...

    async def generate_image_edits(self, params: ImageEditParameters) -> ImageResponse:
        """Create an edited or extended image from an original and a prompt."""
        ...

    async def generate_image_variations(
        self, params: ImageVariationParameters
    ) -> ImageResponse:
        """Create variations of an image."""
        ...

    # ── Embeddings ──────────────────────────────────────────────────

    async def create_embeddings(self, params: EmbeddingsParameters) -> EmbeddingsResponse:
        """Create an embedding vector representing the input text."""
        ...

    # ── Audio ───────────────────────────────────────────────────────

    async def create_transcription(
        self, params: TranscriptionParameters
    ) -> TranscriptionResponse:
        """Transcribe audio into its spoken language."""
        ...

    async def create_translation(
        self, params: TranscriptionParameters
    ) -> TranscriptionResponse:
        """Translate audio into English."""
        ...

    # ── Files ───────────────────────────────────────────────────────

    async def list_files(self) -> ListFilesResponse:
        """List files belonging to the organization."""
        ...

    async def upload_file(self, params: UploadFileParameters) -> File:
        """Upload a document for use by other endpoints (e.g. fine-tuning)."""
        ...

    async def delete_file(self, file_id: str) -> DeleteObject:
        ...

    async def retrieve_file(self, file_id: str) -> File:
        ...

    async def retrieve_file_content(self, file_id: str) -> list[FileContent]:
        """Return the prompt/completion lines of a stored fine-tune file."""
        ...

    # ── Fine-tunes ──────────────────────────────────────────────────

    async def delete_model(self, model: str) -> DeleteObject:
        """Delete a fine-tuned model."""
        ...

    # ── Moderation ──────────────────────────────────────────────────

    async def check_content_policy(
        self, params: ContentPolicyParameters
    ) -> ContentPolicyResponse:
        """Classify whether text violates the content policy."""
        ...
