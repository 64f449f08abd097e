"""Response Envelope — the single JSON shape of every response.

Invariants:
    - error=False only on 2xx responses; error responses never carry data
    - data is externally tagged: {"<PayloadKind>": payload} or null
    - Built once per request, at the terminal step of a service or error handler
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from qa_api.core.domain_types import PayloadKind


class Envelope(BaseModel):
    """Uniform {error, message, data} wrapper."""
    error: bool
    message: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        message: str,
        kind: PayloadKind | None = None,
        payload: BaseModel | Sequence[BaseModel] | None = None,
    ) -> "Envelope":
        """Success envelope; pass kind=None for payload-less replies (delete)."""
        if kind is None:
            return cls(error=False, message=message, data=None)
        if isinstance(payload, BaseModel):
            body: Any = payload.model_dump(mode="json")
        else:
            body = [item.model_dump(mode="json") for item in payload or ()]
        return cls(error=False, message=message, data={kind.value: body})

    @classmethod
    def failure(cls, message: str) -> "Envelope":
        return cls(error=True, message=message, data=None)
