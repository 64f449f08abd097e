"""Question Services — orchestration for the /questions routes.

Invariants:
    - list: pagination validated before storage is touched
    - create: moderation gate runs BEFORE the insert; a gate failure means no row
    - create: the moderated text is logged only; the raw content is what gets stored
    - get/replace/delete of a missing id raise ItemNotFound (same kind whether the
      row never existed or was already deleted)
"""

import logging
from collections.abc import Mapping

from qa_api.core.domain_types import PayloadKind, QuestionId
from qa_api.core.errors import ErrorKind, QAError
from qa_api.core.pagination import extract_pagination
from qa_api.core.repository_protocols import ModerationGate, QuestionRepository
from qa_api.schemas.envelope import Envelope
from qa_api.schemas.question import NewQuestion, Question

logger = logging.getLogger(__name__)


def _not_found(question_id: QuestionId) -> QAError:
    return QAError(ErrorKind.ITEM_NOT_FOUND, f"question {question_id}")


async def list_questions(
    repo: QuestionRepository, params: Mapping[str, str],
) -> Envelope:
    pagination = extract_pagination(params)
    questions = await repo.list_all(pagination.limit, pagination.offset)
    return Envelope.success("found questions", PayloadKind.QUESTIONS, questions)


async def add_question(
    repo: QuestionRepository, moderation: ModerationGate, new_question: NewQuestion,
) -> Envelope:
    """Run the moderation gate, then insert the question as submitted."""
    cleaned = await moderation.check(new_question.content)
    # TODO: store `cleaned` instead of the raw content once product confirms intent
    logger.info(f"Moderation passed, cleaned content: {cleaned!r}")
    question = await repo.create(new_question)
    logger.info(
        f"Question {question.id} added", extra={"question_id": question.id},
    )
    return Envelope.success("question added", PayloadKind.QUESTION, question)


async def get_question(repo: QuestionRepository, question_id: QuestionId) -> Envelope:
    question = await repo.get_by_id(question_id)
    if question is None:
        raise _not_found(question_id)
    return Envelope.success("got question", PayloadKind.QUESTION, question)


async def update_question(
    repo: QuestionRepository, question_id: QuestionId, question: Question,
) -> Envelope:
    """Full replace of title/content/tags; the path id wins over any body id."""
    updated = await repo.replace(question_id, question)
    if updated is None:
        raise _not_found(question_id)
    return Envelope.success("updated question", PayloadKind.QUESTION, updated)


async def delete_question(
    repo: QuestionRepository, question_id: QuestionId,
) -> Envelope:
    if not await repo.delete(question_id):
        raise _not_found(question_id)
    logger.info(
        f"Question {question_id} deleted", extra={"question_id": question_id},
    )
    return Envelope.success("deleted question")
