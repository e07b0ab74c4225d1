"""
Server-sent-event decoding for streaming completions.

A streaming call produces lines such as

    data: {"id": "cmpl-1", "choices": [...]}

    data: [DONE]

Each `data:` payload becomes one typed chunk. The sequence is lazy: a line
is only pulled from the transport when the caller asks for the next chunk,
and the HTTP connection is released as soon as the generator finishes, is
closed, or raises.
"""

import json
import logging
from contextlib import aclosing
from typing import AsyncGenerator, AsyncIterable, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from openaikit.errors import (
    DecodingError,
    IncompleteStreamError,
    RemoteRejectionError,
    TransportError,
    error_from_chunk,
    parse_error_payload,
)

logger = logging.getLogger(__name__)

STREAM_SENTINEL = "[DONE]"
DATA_FIELD = "data:"

T = TypeVar("T", bound=BaseModel)


def parse_sse_line(line: str) -> Optional[str]:
    """
    Return the payload of a `data:` line, or None for anything else.

    Blank lines, comments (leading ':') and other SSE fields such as
    `event:` or `id:` carry no payload.
    """
    line = line.rstrip("\r\n")
    if not line.startswith(DATA_FIELD):
        return None
    payload = line[len(DATA_FIELD):]
    if payload.startswith(" "):
        payload = payload[1:]
    return payload


async def decode_event_stream(
    lines: AsyncIterable[str],
    model: type[T],
) -> AsyncGenerator[T, None]:
    """
    Decode SSE lines into `model` instances, in arrival order.

    Ends cleanly on the [DONE] sentinel. Raises DecodingError on a payload
    that is not valid JSON for `model`, RemoteRejectionError on an in-band
    error object, and IncompleteStreamError if the lines run out before
    the sentinel.
    """
    async for line in lines:
        payload = parse_sse_line(line)
        if not payload:
            continue
        if payload == STREAM_SENTINEL:
            return

        try:
            data = json.loads(payload)
        except ValueError as e:
            logger.warning("Undecodable stream payload: %.200s", payload)
            raise DecodingError(f"Malformed stream chunk: {e}") from e

        rejection = error_from_chunk(data)
        if rejection is not None:
            raise rejection

        try:
            chunk = model.model_validate(data)
        except ValidationError as e:
            logger.warning("Stream chunk does not match %s: %.200s", model.__name__, payload)
            raise DecodingError(f"Stream chunk does not match {model.__name__}: {e}") from e

        yield chunk

    raise IncompleteStreamError(f"Stream closed before {STREAM_SENTINEL} sentinel")


async def stream_response(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    model: type[T],
    json_body: Optional[dict] = None,
    headers: Optional[dict[str, str]] = None,
) -> AsyncGenerator[T, None]:
    """
    Issue a streaming request and decode its event stream into `model` chunks.

    The connection is scoped to this generator: exhausting it, raising,
    or calling aclose() releases it.
    """
    logger.debug("%s %s (stream)", method, url)
    try:
        async with client.stream(method, url, json=json_body, headers=headers) as response:
            if not response.is_success:
                # Read the error body for streaming responses
                error_body = await response.aread()
                payload = parse_error_payload(response.status_code, error_body)
                logger.warning("%s %s rejected: HTTP %s %s",
                               method, url, response.status_code, payload.message)
                raise RemoteRejectionError(response.status_code, payload)

            async with aclosing(decode_event_stream(response.aiter_lines(), model)) as chunks:
                async for chunk in chunks:
                    yield chunk
    except httpx.DecodingError as e:
        logger.warning("%s %s stream could not be decoded: %s", method, url, e)
        raise DecodingError(f"{method} {url} stream could not be decoded: {e}") from e
    except httpx.RequestError as e:
        raise TransportError(f"{method} {url} failed: {e}") from e
