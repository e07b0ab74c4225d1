"""Shared test fixtures for openaikit tests."""

import pytest
import pytest_asyncio


# ─────────────────────────────────────────────────────────────────────
# MOCK DATA
# ─────────────────────────────────────────────────────────────────────

MOCK_BASE_URL = "https://api.test.local/v1"
MOCK_API_KEY = "sk-test-123"

MOCK_COMPLETION_RESPONSE = {
    "id": "cmpl-123",
    "object": "text_completion",
    "created": 1699000000,
    "model": "text-davinci-003",
    "choices": [
        {"text": "Paris.", "index": 0, "logprobs": None, "finish_reason": "stop"}
    ],
    "usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12},
}

MOCK_CHAT_RESPONSE = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1699000000,
    "model": "gpt-3.5-turbo",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "The capital of France is Paris."},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 10, "completion_tokens": 8, "total_tokens": 18},
}

MOCK_CHAT_STREAMING_LINES = [
    'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1699000000,"model":"gpt-3.5-turbo","choices":[{"index":0,"delta":{"role":"assistant"},"finish_reason":null}]}',
    "",
    'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1699000000,"model":"gpt-3.5-turbo","choices":[{"index":0,"delta":{"content":"The capital"},"finish_reason":null}]}',
    "",
    'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1699000000,"model":"gpt-3.5-turbo","choices":[{"index":0,"delta":{"content":" is Paris."},"finish_reason":null}]}',
    "",
    'data: {"id":"chatcmpl-123","object":"chat.completion.chunk","created":1699000000,"model":"gpt-3.5-turbo","choices":[{"index":0,"delta":{},"finish_reason":"stop"}]}',
    "",
    "data: [DONE]",
    "",
]

MOCK_FILE = {
    "id": "file-abc123",
    "object": "file",
    "bytes": 140,
    "created_at": 1613779121,
    "filename": "mydata.jsonl",
    "purpose": "fine-tune",
    "status": "uploaded",
    "status_details": None,
}


def sse_body(lines: list[str]) -> str:
    """Join SSE lines into a response body."""
    return "\n".join(lines) + "\n"


# ─────────────────────────────────────────────────────────────────────
# FIXTURES - Clients
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def mock_openai():
    """Return a canned-response client."""
    from openaikit.clients.mock import MockOpenAI
    return MockOpenAI()


@pytest_asyncio.fixture
async def client():
    """Return a REST client pointed at the test base URL."""
    from openaikit.clients.rest import OpenAI
    async with OpenAI(api_key=MOCK_API_KEY, base_url=MOCK_BASE_URL) as c:
        yield c


# ─────────────────────────────────────────────────────────────────────
# FIXTURES - HTTP Mocking
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def mock_completion_response():
    """Return mock /completions response."""
    return dict(MOCK_COMPLETION_RESPONSE)


@pytest.fixture
def mock_chat_response():
    """Return mock /chat/completions response."""
    return dict(MOCK_CHAT_RESPONSE)


@pytest.fixture
def mock_chat_streaming_body():
    """Return a complete chat SSE body ending in [DONE]."""
    return sse_body(MOCK_CHAT_STREAMING_LINES)


@pytest.fixture
def mock_file():
    return dict(MOCK_FILE)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove OPENAI_* variables so tests see only what they set."""
    for key in ("OPENAI_API_KEY", "OPENAI_ORGANIZATION", "OPENAI_BASE_URL", "OPENAI_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
