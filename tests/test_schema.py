"""Tests for parameter normalisation and response decoding."""

import pytest
from pydantic import ValidationError

from openaikit.schema import (
    ChatMessage,
    ChatParameters,
    ChatResponse,
    CompletionParameters,
    CompletionResponse,
    ContentPolicyResponse,
    ImageEditParameters,
    ImageParameters,
    ImageResponse,
    ImageSize,
    ImageVariationParameters,
    ListModelResponse,
    ObjectKind,
    TranscriptionParameters,
    Usage,
)


# ─────────────────────────────────────────────────────────────────────
# Clamping
# ─────────────────────────────────────────────────────────────────────


class TestImageCountClamping:
    """Image count is clamped to [1, 10], never rejected."""

    @pytest.mark.parametrize("requested, stored", [
        (-5, 1), (-1, 1), (0, 1), (1, 1), (2, 2), (9, 9), (10, 10), (11, 10), (250, 10),
    ])
    def test_generation_count(self, requested, stored):
        params = ImageParameters(prompt="A cute baby sea otter", n=requested)
        assert params.n == stored
        assert params.number_of_images == stored

    def test_edit_count(self):
        params = ImageEditParameters(image=b"\x89PNG", prompt="Add a hat", n=42)
        assert params.n == 10

    def test_variation_count(self):
        params = ImageVariationParameters(image=b"\x89PNG", n=0)
        assert params.n == 1

    def test_empty_prompt_is_not_rejected_locally(self):
        """Empty prompts are left for the server (or mock) to reject."""
        params = ImageParameters(prompt="")
        assert params.prompt == ""


class TestSamplingClamps:
    def test_completion_bounds(self):
        params = CompletionParameters(
            temperature=3.5, top_p=-0.2, presence_penalty=9, frequency_penalty=-9,
            logprobs=12, n=0, best_of=-3,
        )
        assert params.temperature == 2.0
        assert params.top_p == 0.0
        assert params.presence_penalty == 2.0
        assert params.frequency_penalty == -2.0
        assert params.logprobs == 5
        assert params.n == 1
        assert params.best_of == 1

    def test_chat_temperature(self):
        params = ChatParameters(
            messages=[ChatMessage(role="user", content="Hi")], temperature=-1
        )
        assert params.temperature == 0.0

    def test_transcription_temperature(self):
        params = TranscriptionParameters(file=b"RIFF", temperature=1.7)
        assert params.temperature == 1.0

    def test_parameters_are_immutable(self):
        params = ImageParameters(prompt="A red apple.")
        with pytest.raises(ValidationError):
            params.n = 4


# ─────────────────────────────────────────────────────────────────────
# Encoding
# ─────────────────────────────────────────────────────────────────────


class TestRequestBodies:
    def test_unset_optionals_are_omitted(self):
        body = CompletionParameters(model="davinci", prompt="Say this is a test").to_body()
        assert body["model"] == "davinci"
        assert body["prompt"] == "Say this is a test"
        assert "suffix" not in body
        assert "user" not in body
        assert "logit_bias" not in body

    def test_enums_encode_as_wire_values(self):
        body = ImageParameters(prompt="x", size=ImageSize.SMALL, response_format="b64_json").to_body()
        assert body["size"] == "256x256"
        assert body["response_format"] == "b64_json"

    def test_chat_messages_encode(self):
        params = ChatParameters(messages=[
            ChatMessage(role="system", content="You are helpful."),
            ChatMessage(role="user", content="Hello"),
        ])
        body = params.to_body()
        assert body["messages"] == [
            {"role": "system", "content": "You are helpful."},
            {"role": "user", "content": "Hello"},
        ]

    def test_multipart_fields_are_strings(self):
        fields = ImageVariationParameters(image=b"png", n=3, user="u1").form_fields()
        assert fields == {"n": "3", "size": "1024x1024", "response_format": "url", "user": "u1"}
        assert "image" not in fields


# ─────────────────────────────────────────────────────────────────────
# Decoding
# ─────────────────────────────────────────────────────────────────────


class TestUsage:
    def test_total_matches_sum(self):
        usage = Usage(prompt_tokens=5, completion_tokens=6, total_tokens=11)
        assert usage.total_tokens == usage.prompt_tokens + usage.completion_tokens

    def test_embeddings_usage_has_no_completion(self):
        usage = Usage(prompt_tokens=8, total_tokens=8)
        assert usage.completion_tokens is None

    def test_mismatched_total_rejected(self):
        with pytest.raises(ValidationError, match="total_tokens"):
            Usage(prompt_tokens=5, completion_tokens=6, total_tokens=12)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            Usage(prompt_tokens=-1, total_tokens=0)


class TestResponses:
    def test_unknown_fields_ignored(self):
        resp = ListModelResponse.model_validate({
            "object": "list",
            "data": [{"id": "m", "object": "model", "created": 1, "owned_by": "me", "new_field": 1}],
            "has_more": False,
        })
        assert resp.data[0].id == "m"

    def test_unknown_object_kind_rejected(self):
        with pytest.raises(ValidationError):
            ListModelResponse.model_validate({"object": "bucket", "data": []})

    def test_chat_chunk_final_flag(self):
        chunk = ChatResponse.model_validate({
            "id": "c", "object": "chat.completion.chunk", "created": 1, "model": "m",
            "choices": [{"index": 0, "delta": {}, "finish_reason": "stop"}],
        })
        assert chunk.object is ObjectKind.CHAT_COMPLETION_CHUNK
        assert chunk.is_final
        assert chunk.usage is None

    def test_completion_chunk_final_flag(self):
        chunks = [
            CompletionResponse.model_validate({
                "id": "cmpl-1", "object": "text_completion", "created": 1, "model": "m",
                "choices": [{"text": text, "index": 0, "finish_reason": reason}],
            })
            for text, reason in [("Hel", None), ("lo", "stop")]
        ]
        assert [c.is_final for c in chunks] == [False, True]

    def test_image_data_prefers_url(self):
        resp = ImageResponse.model_validate({"created": 1, "data": [{"url": "http://x/a.png"}, {"b64_json": "AAAA"}]})
        assert resp.data[0].image == "http://x/a.png"
        assert resp.data[1].image == "AAAA"

    def test_moderation_aliases(self):
        scores = {
            "hate": 0.1, "hate/threatening": 0.2, "self-harm": 0.3, "sexual": 0.4,
            "sexual/minors": 0.5, "violence": 0.6, "violence/graphic": 0.7,
        }
        resp = ContentPolicyResponse.model_validate({
            "id": "modr-1",
            "model": "text-moderation-005",
            "results": [{
                "flagged": False,
                "categories": {key: False for key in scores},
                "category_scores": scores,
            }],
        })
        result = resp.results[0]
        assert result.category_scores.self_harm == 0.3
        assert result.category_scores.violence_graphic == 0.7
        assert result.categories.hate_threatening is False
