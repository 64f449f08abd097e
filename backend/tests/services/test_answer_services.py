"""Answer Services — existence check before insert, content-only replace.

Invariants:
    - add_answer with an unknown question_id raises ItemNotFound and never inserts
    - add_answer looks the question up exactly once, then inserts
    - replace only changes content
"""

import pytest

from qa_api.core.errors import ErrorKind, QAError
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.question import NewQuestion
from qa_api.services import answers as svc
from tests.fakes import InMemoryAnswerRepository, InMemoryQuestionRepository


@pytest.fixture
def questions():
    return InMemoryQuestionRepository()


@pytest.fixture
def answers():
    return InMemoryAnswerRepository()


async def test_add_answer_to_missing_question(answers, questions):
    with pytest.raises(QAError) as exc_info:
        await svc.add_answer(answers, questions, NewAnswer(content="a", question_id=7))
    assert exc_info.value.kind is ErrorKind.ITEM_NOT_FOUND
    assert exc_info.value.message == "item not found: no question with provided id"
    assert answers.calls == []
    assert answers.rows == {}


async def test_add_answer_checks_question_then_inserts(answers, questions):
    q = await questions.create(NewQuestion(title="t", content="c"))
    questions.calls.clear()

    env = await svc.add_answer(
        answers, questions, NewAnswer(content="use json.loads", question_id=q.id),
    )

    assert questions.calls == ["get_by_id"]
    assert answers.calls == ["create"]
    assert env.message == "added answer to question"
    assert env.data["Answer"]["question_id"] == q.id


async def test_replace_changes_content_only(answers, questions):
    stored = await answers.create(NewAnswer(content="old", question_id=1))
    body = Answer(id=stored.id, content="new", question_id=99)

    env = await svc.update_answer(answers, stored.id, body)

    assert env.data["Answer"] == {"id": stored.id, "content": "new", "question_id": 1}
    assert env.message == "answer updated"


async def test_get_missing_answer(answers):
    with pytest.raises(QAError) as exc_info:
        await svc.get_answer(answers, 5)
    assert exc_info.value.kind is ErrorKind.ITEM_NOT_FOUND


async def test_delete_missing_answer(answers):
    with pytest.raises(QAError) as exc_info:
        await svc.delete_answer(answers, 5)
    assert exc_info.value.kind is ErrorKind.ITEM_NOT_FOUND


async def test_list_for_question_filters(answers):
    await answers.create(NewAnswer(content="a", question_id=1))
    await answers.create(NewAnswer(content="b", question_id=2))

    env = await svc.list_answers_for_question(answers, 1)

    assert env.message == "found answers to question"
    assert [a["content"] for a in env.data["Answers"]] == ["a"]
