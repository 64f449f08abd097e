"""Error Taxonomy — closed set of failure kinds and their HTTP mapping.

Invariants:
    - Every failure the API reports is a QAError carrying exactly one ErrorKind
    - _STATUS_BY_KIND and _MESSAGE_BY_KIND cover every ErrorKind (checked at import)
    - Classification happens once: a QAError is never re-wrapped into another kind

Design Decisions:
    - Enum + lookup tables over one subclass per failure: the central handler
      dispatches on exc.kind, never on isinstance chains
    - Generic client errors map to 416 Range Not Satisfiable, kept for
      wire compatibility with existing clients
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Every failure the request pipeline can classify."""
    PARSE = "parse"
    MISSING_PARAMETERS = "missing_parameters"
    OUT_OF_RANGE = "out_of_range"
    ITEM_NOT_FOUND = "item_not_found"
    DUPLICATE_ID = "duplicate_id"
    DATABASE_QUERY_ERROR = "database_query_error"
    EXTERNAL_API_ERROR = "external_api_error"
    INVALID_ID_SHAPE = "invalid_id_shape"
    MALFORMED_BODY = "malformed_body"
    CORS_REJECTED = "cors_rejected"
    UNMATCHED = "unmatched"


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.PARSE: 416,
    ErrorKind.MISSING_PARAMETERS: 416,
    ErrorKind.OUT_OF_RANGE: 416,
    ErrorKind.ITEM_NOT_FOUND: 416,
    ErrorKind.DUPLICATE_ID: 416,
    ErrorKind.DATABASE_QUERY_ERROR: 416,
    ErrorKind.EXTERNAL_API_ERROR: 500,
    ErrorKind.INVALID_ID_SHAPE: 422,
    ErrorKind.MALFORMED_BODY: 422,
    ErrorKind.CORS_REJECTED: 403,
    ErrorKind.UNMATCHED: 404,
}

# "{}" is replaced by the error detail; templates without it ignore the detail.
_MESSAGE_BY_KIND: dict[ErrorKind, str] = {
    ErrorKind.PARSE: "could not parse provided parameter: {}",
    ErrorKind.MISSING_PARAMETERS: "required parameter missing: {}",
    ErrorKind.OUT_OF_RANGE: "value provided for parameter out of range: {}",
    ErrorKind.ITEM_NOT_FOUND: "item not found: {}",
    ErrorKind.DUPLICATE_ID: "duplicate id: {}",
    ErrorKind.DATABASE_QUERY_ERROR: "database query could not be executed: {}",
    ErrorKind.EXTERNAL_API_ERROR: "error querying external API: {}",
    ErrorKind.INVALID_ID_SHAPE: "no valid id provided",
    ErrorKind.MALFORMED_BODY: "request body could not be deserialized: {}",
    ErrorKind.CORS_REJECTED: "{}",
    ErrorKind.UNMATCHED: "not found",
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind."""
    return _STATUS_BY_KIND[kind]


def describe(kind: ErrorKind, detail: str = "") -> str:
    """Human-readable message for an error kind and its detail text."""
    return _MESSAGE_BY_KIND[kind].format(detail)


class QAError(Exception):
    """Classified failure raised anywhere in the request pipeline."""

    def __init__(self, kind: ErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        self.message = describe(kind, detail)
        self.http_status = status_for(kind)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"QAError({self.kind.value!r}, {self.detail!r})"
