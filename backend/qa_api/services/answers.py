"""Answer Services — orchestration for the /answers and /answer routes.

Invariants:
    - add: the referenced question is looked up first; if missing, ItemNotFound
      and the insert never runs. The fetched question is discarded.
    - replace only applies `content`; id and question_id stay as stored
"""

import logging

from qa_api.core.domain_types import AnswerId, PayloadKind, QuestionId
from qa_api.core.errors import ErrorKind, QAError
from qa_api.core.repository_protocols import AnswerRepository, QuestionRepository
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.envelope import Envelope

logger = logging.getLogger(__name__)


def _not_found(answer_id: AnswerId) -> QAError:
    return QAError(ErrorKind.ITEM_NOT_FOUND, f"answer {answer_id}")


async def list_answers(repo: AnswerRepository) -> Envelope:
    answers = await repo.list_all()
    return Envelope.success("got answers", PayloadKind.ANSWERS, answers)


async def add_answer(
    answers: AnswerRepository, questions: QuestionRepository, new_answer: NewAnswer,
) -> Envelope:
    if await questions.get_by_id(QuestionId(new_answer.question_id)) is None:
        raise QAError(ErrorKind.ITEM_NOT_FOUND, "no question with provided id")
    answer = await answers.create(new_answer)
    logger.info(
        f"Answer {answer.id} added to question {answer.question_id}",
        extra={"answer_id": answer.id, "question_id": answer.question_id},
    )
    return Envelope.success("added answer to question", PayloadKind.ANSWER, answer)


async def get_answer(repo: AnswerRepository, answer_id: AnswerId) -> Envelope:
    answer = await repo.get_by_id(answer_id)
    if answer is None:
        raise _not_found(answer_id)
    return Envelope.success("got answer", PayloadKind.ANSWER, answer)


async def update_answer(
    repo: AnswerRepository, answer_id: AnswerId, answer: Answer,
) -> Envelope:
    updated = await repo.replace(answer_id, answer)
    if updated is None:
        raise _not_found(answer_id)
    return Envelope.success("answer updated", PayloadKind.ANSWER, updated)


async def delete_answer(repo: AnswerRepository, answer_id: AnswerId) -> Envelope:
    if not await repo.delete(answer_id):
        raise _not_found(answer_id)
    return Envelope.success("deleted answer")


async def list_answers_for_question(
    repo: AnswerRepository, question_id: QuestionId,
) -> Envelope:
    answers = await repo.list_for_question(question_id)
    return Envelope.success("found answers to question", PayloadKind.ANSWERS, answers)
