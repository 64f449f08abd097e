"""Request Dependencies — hand the lifespan-built clients and parsed path ids to route handlers.

Invariants:
    - Store and ModerationClient are read from app.state, never from module globals
    - Tests swap them through app.dependency_overrides
    - Path ids are taken as raw text and parsed with parse_int32; anything
      else raises InvalidIdShape before the handler body runs
"""

from typing import Annotated

from fastapi import Path, Request

from qa_api.core.domain_types import AnswerId, QuestionId, parse_int32
from qa_api.core.errors import ErrorKind, QAError
from qa_api.infrastructure.moderation_client import ModerationClient
from qa_api.infrastructure.repositories import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_moderation(request: Request) -> ModerationClient:
    return request.app.state.moderation


def _path_id(raw: str) -> int:
    try:
        return parse_int32(raw)
    except ValueError:
        raise QAError(ErrorKind.INVALID_ID_SHAPE) from None


def question_path_id(question_id: Annotated[str, Path()]) -> QuestionId:
    return QuestionId(_path_id(question_id))


def answer_path_id(answer_id: Annotated[str, Path()]) -> AnswerId:
    return AnswerId(_path_id(answer_id))
