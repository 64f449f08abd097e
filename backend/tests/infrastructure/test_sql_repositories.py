"""SQL Repositories — CRUD against in-memory SQLite, error and timeout mapping.

Invariants:
    - Missing rows ⇒ None / False, never an exception
    - Driver failures ⇒ QAError(DATABASE_QUERY_ERROR)
    - Operations exceeding the storage budget ⇒ QAError(DATABASE_QUERY_ERROR)
    - The answers → questions foreign key is enforced, never cascaded
"""

import asyncio

import pytest
from sqlalchemy import text

from qa_api.core.errors import ErrorKind, QAError
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.question import NewQuestion, Question


async def test_question_crud(store):
    repo = store.questions
    created = await repo.create(NewQuestion(title="t", content="c", tags=["x", "y"]))
    assert created.id > 0
    assert await repo.get_by_id(created.id) == created

    replaced = await repo.replace(
        created.id, Question(id=created.id, title="t2", content="c2", tags=None),
    )
    assert replaced == Question(id=created.id, title="t2", content="c2", tags=None)

    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False
    assert await repo.get_by_id(created.id) is None


async def test_question_list_limit_offset(store):
    for i in range(5):
        await store.questions.create(NewQuestion(title=f"q{i}", content="c"))

    everything = await store.questions.list_all(None, 0)
    page = await store.questions.list_all(2, 3)

    assert [q.title for q in everything] == ["q0", "q1", "q2", "q3", "q4"]
    assert [q.title for q in page] == ["q3", "q4"]


async def test_replace_missing_returns_none(store):
    missing = Question(id=9, title="t", content="c")
    assert await store.questions.replace(9, missing) is None
    assert await store.answers.replace(9, Answer(id=9, content="c", question_id=1)) is None


async def test_answer_crud_and_filter(store):
    q = await store.questions.create(NewQuestion(title="t", content="c"))
    a1 = await store.answers.create(NewAnswer(content="one", question_id=q.id))
    other = await store.questions.create(NewQuestion(title="o", content="c"))
    await store.answers.create(NewAnswer(content="two", question_id=other.id))

    assert [a.id for a in await store.answers.list_for_question(q.id)] == [a1.id]
    assert len(await store.answers.list_all()) == 2

    updated = await store.answers.replace(
        a1.id, Answer(id=a1.id, content="uno", question_id=999),
    )
    assert updated == Answer(id=a1.id, content="uno", question_id=q.id)
    assert await store.answers.delete(a1.id) is True
    assert await store.answers.get_by_id(a1.id) is None


async def test_driver_error_is_database_query_error(store):
    async def bad_query(session):
        await session.execute(text("SELECT * FROM no_such_table"))

    with pytest.raises(QAError) as exc_info:
        await store.db.run(bad_query, "bad query")
    assert exc_info.value.kind is ErrorKind.DATABASE_QUERY_ERROR
    assert exc_info.value.http_status == 416
    assert "no_such_table" in exc_info.value.message


async def test_slow_operation_hits_timeout_budget(store):
    store.db.timeout_seconds = 0.05

    async def slow(session):
        await asyncio.sleep(1)

    with pytest.raises(QAError) as exc_info:
        await store.db.run(slow, "slow op")
    assert exc_info.value.kind is ErrorKind.DATABASE_QUERY_ERROR
    assert "timed out" in exc_info.value.message


async def test_health_check(store):
    assert await store.db.health_check() is True


async def test_deleting_answered_question_is_rejected(store):
    q = await store.questions.create(NewQuestion(title="t", content="c"))
    a = await store.answers.create(NewAnswer(content="a", question_id=q.id))

    with pytest.raises(QAError) as exc_info:
        await store.questions.delete(q.id)

    assert exc_info.value.kind is ErrorKind.DATABASE_QUERY_ERROR
    assert "FOREIGN KEY" in exc_info.value.message
    assert await store.questions.get_by_id(q.id) is not None
    assert await store.answers.get_by_id(a.id) is not None


async def test_answer_for_unknown_question_is_rejected(store):
    with pytest.raises(QAError) as exc_info:
        await store.answers.create(NewAnswer(content="a", question_id=404))

    assert exc_info.value.kind is ErrorKind.DATABASE_QUERY_ERROR
    assert await store.answers.list_all() == []
