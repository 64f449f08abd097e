"""Error Taxonomy — verifies the closed kind → status/message mapping.

Tests:
    - Every ErrorKind has a status and a message (no gaps in either table)
    - Client-side failures map to 416, moderation to 500, shape errors to 422
    - Messages embed the detail text where the template has a slot
"""

import pytest

from qa_api.core.errors import (
    _MESSAGE_BY_KIND, _STATUS_BY_KIND, ErrorKind, QAError, describe, status_for,
)


def test_tables_cover_every_kind():
    assert set(_STATUS_BY_KIND) == set(ErrorKind)
    assert set(_MESSAGE_BY_KIND) == set(ErrorKind)


def test_every_kind_has_a_status():
    for kind in ErrorKind:
        assert status_for(kind) in {403, 404, 416, 422, 500}


@pytest.mark.parametrize("kind", [
    ErrorKind.PARSE,
    ErrorKind.MISSING_PARAMETERS,
    ErrorKind.OUT_OF_RANGE,
    ErrorKind.ITEM_NOT_FOUND,
    ErrorKind.DUPLICATE_ID,
    ErrorKind.DATABASE_QUERY_ERROR,
])
def test_generic_client_errors_are_range_not_satisfiable(kind):
    assert status_for(kind) == 416


def test_distinct_statuses():
    assert status_for(ErrorKind.EXTERNAL_API_ERROR) == 500
    assert status_for(ErrorKind.INVALID_ID_SHAPE) == 422
    assert status_for(ErrorKind.MALFORMED_BODY) == 422
    assert status_for(ErrorKind.CORS_REJECTED) == 403
    assert status_for(ErrorKind.UNMATCHED) == 404


def test_parse_message_cites_value():
    assert describe(ErrorKind.PARSE, "x") == "could not parse provided parameter: x"


def test_fixed_messages_ignore_detail():
    assert describe(ErrorKind.INVALID_ID_SHAPE, "abc") == "no valid id provided"
    assert describe(ErrorKind.UNMATCHED) == "not found"


def test_qa_error_carries_kind_status_and_message():
    exc = QAError(ErrorKind.ITEM_NOT_FOUND, "no question with provided id")
    assert exc.kind is ErrorKind.ITEM_NOT_FOUND
    assert exc.http_status == 416
    assert exc.message == "item not found: no question with provided id"
    assert str(exc) == exc.message
