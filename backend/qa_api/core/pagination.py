"""Pagination Validator — turns list-query parameters into a bounded Pagination.

Invariants:
    - Empty params ⇒ Pagination(limit=None, offset=0), nothing else inspected
    - Presence of BOTH `start` and `end` keys gates parsing; their values are unused
    - `limit` and `offset` must be base-10 32-bit signed integers
    - No upper bound enforced here (storage applies its own limits)
"""

from collections.abc import Mapping
from dataclasses import dataclass

from qa_api.core.domain_types import parse_int32
from qa_api.core.errors import ErrorKind, QAError

@dataclass(frozen=True)
class Pagination:
    """Validated limit/offset pair for one list request."""
    limit: int | None = None
    offset: int = 0


def extract_pagination(params: Mapping[str, str]) -> Pagination:
    """Validate a query-string map into a Pagination.

    Raises:
        QAError(MISSING_PARAMETERS): `start`/`end`, or `limit`/`offset`, absent.
        QAError(PARSE): `limit` or `offset` is not a 32-bit integer.
    """
    if not params:
        return Pagination()
    if "start" not in params or "end" not in params:
        raise QAError(
            ErrorKind.MISSING_PARAMETERS, "start and/or end parameters missing",
        )
    return Pagination(
        limit=_parse_int32(params, "limit"),
        offset=_parse_int32(params, "offset"),
    )


def _parse_int32(params: Mapping[str, str], key: str) -> int:
    if key not in params:
        raise QAError(ErrorKind.MISSING_PARAMETERS, key)
    raw = params[key]
    try:
        return parse_int32(raw)
    except ValueError:
        raise QAError(ErrorKind.PARSE, raw) from None
