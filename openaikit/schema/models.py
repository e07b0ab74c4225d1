from typing import Any, Optional

from openaikit.schema.common import ObjectKind, Response


class Model(Response):
    """A model the API can serve, with its owner and creation time."""
    id: str
    object: ObjectKind
    created: int
    owned_by: str
    permission: Optional[list[dict[str, Any]]] = None
    root: Optional[str] = None
    parent: Optional[str] = None


class ListModelResponse(Response):
    object: ObjectKind
    data: list[Model]
