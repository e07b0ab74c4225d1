from typing import Optional, Union

from openaikit.schema.common import ObjectKind, Parameters, Response, Usage


class EmbeddingsParameters(Parameters):
    """Parameters for POST /embeddings."""
    model: str = "text-embedding-ada-002"
    input: Union[str, list[str]]
    user: Optional[str] = None


class Embedding(Response):
    object: ObjectKind
    embedding: list[float]
    index: int


class EmbeddingsResponse(Response):
    object: ObjectKind
    data: list[Embedding]
    model: str
    usage: Usage
