"""
OpenAI - HTTP implementation of OpenAIProtocol over httpx.

One AsyncClient is held for the lifetime of the instance and shared by
every call; it only carries connection configuration, so concurrent
calls need no locking. Close it with `aclose()` or `async with`.
"""

import logging
from typing import AsyncIterator, Optional, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from openaikit.config import ClientConfig
from openaikit.errors import (
    DecodingError,
    RemoteRejectionError,
    TransportError,
    parse_error_payload,
)
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
from openaikit.streaming import stream_response

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def decode_body(body: Union[bytes, str], model: type[T]) -> T:
    """Parse a JSON body into `model`, mapping failures to DecodingError."""
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Response does not match %s: %.200r", model.__name__, body)
        raise DecodingError(f"Response does not match {model.__name__}: {e}") from e


class OpenAI:
    """
    OpenAI REST implementation of OpenAIProtocol.

    Usage:
        async with OpenAI(api_key="sk-...") as client:
            models = await client.list_models()
            async for chunk in client.generate_chat_completion_streaming(params):
                ...
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        organization: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key. Falls back to OPENAI_API_KEY.
            organization: Organization ID. Falls back to OPENAI_ORGANIZATION.
            base_url: API root. Falls back to OPENAI_BASE_URL, then the public API.
            timeout_seconds: Per-request timeout for the owned AsyncClient.
            http_client: Pre-built AsyncClient. Not closed by aclose().

        Raises:
            ValueError: If no API key is provided and OPENAI_API_KEY is not set
        """
        env = ClientConfig.from_env()
        self._config = ClientConfig(
            api_key=api_key or env.api_key,
            organization=organization or env.organization,
            base_url=(base_url or env.base_url).rstrip("/"),
            timeout_seconds=timeout_seconds if timeout_seconds is not None else env.timeout_seconds,
        )
        if not self._config.api_key:
            raise ValueError(
                "OpenAI API key required. "
                "Provide api_key parameter or set OPENAI_API_KEY environment variable."
            )

        self._headers = self._config.auth_headers()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self._config.timeout_seconds)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "OpenAI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ─────────────────────────────────────────────────────────────────
    # TRANSPORT
    # ─────────────────────────────────────────────────────────────────

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    async def _send(
        self,
        method: str,
        path: str,
        json_body: Optional[dict] = None,
        data: Optional[dict] = None,
        files: Optional[dict] = None,
    ) -> httpx.Response:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            response = await self._client.request(
                method, url, json=json_body, data=data, files=files, headers=self._headers
            )
        except httpx.DecodingError as e:
            logger.warning("%s %s body could not be decoded: %s", method, url, e)
            raise DecodingError(f"{method} {url} body could not be decoded: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        # Redirects are not followed, so a 3xx is a rejection too.
        if not response.is_success:
            payload = parse_error_payload(response.status_code, response.content)
            logger.warning("%s %s rejected: HTTP %s %s",
                           method, url, response.status_code, payload.message)
            raise RemoteRejectionError(response.status_code, payload)
        return response

    async def _request(self, method: str, path: str, model: type[T], **kwargs) -> T:
        response = await self._send(method, path, **kwargs)
        return decode_body(response.content, model)

    def _stream(self, path: str, body: dict, model: type[T]) -> AsyncIterator[T]:
        return stream_response(
            self._client, "POST", self._url(path), model,
            json_body={**body, "stream": True}, headers=self._headers,
        )

    # ─────────────────────────────────────────────────────────────────
    # MODELS
    # ─────────────────────────────────────────────────────────────────

    async def list_models(self) -> ListModelResponse:
        return await self._request("GET", "/models", ListModelResponse)

    async def retrieve_model(self, model_id: str) -> Model:
        return await self._request("GET", f"/models/{model_id}", Model)

    # ─────────────────────────────────────────────────────────────────
    # COMPLETIONS & CHAT
    # ─────────────────────────────────────────────────────────────────

    async def generate_completion(self, params: CompletionParameters) -> CompletionResponse:
        return await self._request(
            "POST", "/completions", CompletionResponse, json_body=params.to_body()
        )

    def generate_completion_streaming(
        self, params: CompletionParameters
    ) -> AsyncIterator[CompletionResponse]:
        return self._stream("/completions", params.to_body(), CompletionResponse)

    async def generate_chat_completion(self, params: ChatParameters) -> ChatResponse:
        return await self._request(
            "POST", "/chat/completions", ChatResponse, json_body=params.to_body()
        )

    def generate_chat_completion_streaming(
        self, params: ChatParameters
    ) -> AsyncIterator[ChatResponse]:
        return self._stream("/chat/completions", params.to_body(), ChatResponse)

    # ─────────────────────────────────────────────────────────────────
    # IMAGES
    # ─────────────────────────────────────────────────────────────────

    async def create_image(self, params: ImageParameters) -> ImageResponse:
        return await self._request(
            "POST", "/images/generations", ImageResponse, json_body=params.to_body()
        )

    async def generate_image_edits(self, params: ImageEditParameters) -> ImageResponse:
        files = {"image": ("image.png", params.image, "image/png")}
        if params.mask is not None:
            files["mask"] = ("mask.png", params.mask, "image/png")
        return await self._request(
            "POST", "/images/edits", ImageResponse,
            data=params.form_fields(), files=files,
        )

    async def generate_image_variations(
        self, params: ImageVariationParameters
    ) -> ImageResponse:
        return await self._request(
            "POST", "/images/variations", ImageResponse,
            data=params.form_fields(),
            files={"image": ("image.png", params.image, "image/png")},
        )

    # ─────────────────────────────────────────────────────────────────
    # EMBEDDINGS
    # ─────────────────────────────────────────────────────────────────

    async def create_embeddings(self, params: EmbeddingsParameters) -> EmbeddingsResponse:
        return await self._request(
            "POST", "/embeddings", EmbeddingsResponse, json_body=params.to_body()
        )

    # ─────────────────────────────────────────────────────────────────
    # AUDIO
    # ─────────────────────────────────────────────────────────────────

    async def _audio(
        self, path: str, params: TranscriptionParameters, fields: dict[str, str]
    ) -> TranscriptionResponse:
        response = await self._send(
            "POST", path, data=fields,
            files={"file": (params.file_name, params.file)},
        )
        if params.returns_json:
            return decode_body(response.content, TranscriptionResponse)
        # text, srt and vtt come back as plain text
        return TranscriptionResponse(text=response.text)

    async def create_transcription(
        self, params: TranscriptionParameters
    ) -> TranscriptionResponse:
        return await self._audio("/audio/transcriptions", params, params.form_fields())

    async def create_translation(
        self, params: TranscriptionParameters
    ) -> TranscriptionResponse:
        fields = params.form_fields()
        # Translation always targets English.
        fields.pop("language", None)
        return await self._audio("/audio/translations", params, fields)

    # ─────────────────────────────────────────────────────────────────
    # FILES
    # ─────────────────────────────────────────────────────────────────

    async def list_files(self) -> ListFilesResponse:
        return await self._request("GET", "/files", ListFilesResponse)

    async def upload_file(self, params: UploadFileParameters) -> File:
        return await self._request(
            "POST", "/files", File,
            data={"purpose": params.purpose},
            files={"file": (params.file_name, params.file, "application/octet-stream")},
        )

    async def delete_file(self, file_id: str) -> DeleteObject:
        return await self._request("DELETE", f"/files/{file_id}", DeleteObject)

    async def retrieve_file(self, file_id: str) -> File:
        return await self._request("GET", f"/files/{file_id}", File)

    async def retrieve_file_content(self, file_id: str) -> list[FileContent]:
        response = await self._send("GET", f"/files/{file_id}/content")
        # Fine-tune files are JSONL: one prompt/completion object per line.
        return [
            decode_body(line, FileContent)
            for line in response.text.splitlines()
            if line.strip()
        ]

    # ─────────────────────────────────────────────────────────────────
    # FINE-TUNES & MODERATION
    # ─────────────────────────────────────────────────────────────────

    async def delete_model(self, model: str) -> DeleteObject:
        return await self._request("DELETE", f"/models/{model}", DeleteObject)

    async def check_content_policy(
        self, params: ContentPolicyParameters
    ) -> ContentPolicyResponse:
        return await self._request(
            "POST", "/moderations", ContentPolicyResponse, json_body=params.to_body()
        )
