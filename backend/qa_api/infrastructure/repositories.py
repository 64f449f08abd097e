"""SQL Repositories — SQLAlchemy implementations of the storage Protocols.

Invariants:
    - Each public method runs in its own session via DatabaseSessionManager.run()
      (one statement, one commit, bounded by the storage timeout)
    - Rows are converted to pydantic schemas before leaving this module
    - get_by_id/replace return None and delete returns False for missing rows
    - list_all for questions orders by id so limit/offset pages are stable

Design Decisions:
    - Store groups the manager and both repositories into one explicitly
      constructed value that the app lifespan owns (no process-wide globals)
"""

from dataclasses import dataclass

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from qa_api.core.domain_types import AnswerId, QuestionId
from qa_api.infrastructure.database import DatabaseSessionManager
from qa_api.models.answer import Answer as AnswerRow
from qa_api.models.question import Question as QuestionRow
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.question import NewQuestion, Question


class SqlQuestionRepository:
    """QuestionRepository backed by the `questions` table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_all(self, limit: int | None, offset: int) -> list[Question]:
        async def op(session: AsyncSession) -> list[Question]:
            query = select(QuestionRow).order_by(QuestionRow.id).offset(offset)
            if limit is not None:
                query = query.limit(limit)
            result = await session.execute(query)
            return [Question.model_validate(row) for row in result.scalars()]

        return await self._db.run(op, "list questions")

    async def get_by_id(self, question_id: QuestionId) -> Question | None:
        async def op(session: AsyncSession) -> Question | None:
            row = await session.get(QuestionRow, question_id)
            return Question.model_validate(row) if row else None

        return await self._db.run(op, "get question")

    async def create(self, new_question: NewQuestion) -> Question:
        async def op(session: AsyncSession) -> Question:
            row = QuestionRow(
                title=new_question.title,
                content=new_question.content,
                tags=new_question.tags,
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return Question.model_validate(row)

        return await self._db.run(op, "insert question")

    async def replace(
        self, question_id: QuestionId, question: Question,
    ) -> Question | None:
        async def op(session: AsyncSession) -> Question | None:
            row = await session.get(QuestionRow, question_id)
            if row is None:
                return None
            row.title = question.title
            row.content = question.content
            row.tags = question.tags
            await session.commit()
            await session.refresh(row)
            return Question.model_validate(row)

        return await self._db.run(op, "update question")

    async def delete(self, question_id: QuestionId) -> bool:
        async def op(session: AsyncSession) -> bool:
            result = await session.execute(
                delete(QuestionRow).where(QuestionRow.id == question_id),
            )
            await session.commit()
            return result.rowcount > 0

        return await self._db.run(op, "delete question")


class SqlAnswerRepository:
    """AnswerRepository backed by the `answers` table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_all(self) -> list[Answer]:
        async def op(session: AsyncSession) -> list[Answer]:
            result = await session.execute(select(AnswerRow).order_by(AnswerRow.id))
            return [Answer.model_validate(row) for row in result.scalars()]

        return await self._db.run(op, "list answers")

    async def get_by_id(self, answer_id: AnswerId) -> Answer | None:
        async def op(session: AsyncSession) -> Answer | None:
            row = await session.get(AnswerRow, answer_id)
            return Answer.model_validate(row) if row else None

        return await self._db.run(op, "get answer")

    async def create(self, new_answer: NewAnswer) -> Answer:
        async def op(session: AsyncSession) -> Answer:
            row = AnswerRow(
                content=new_answer.content, question_id=new_answer.question_id,
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return Answer.model_validate(row)

        return await self._db.run(op, "insert answer")

    async def replace(self, answer_id: AnswerId, answer: Answer) -> Answer | None:
        async def op(session: AsyncSession) -> Answer | None:
            row = await session.get(AnswerRow, answer_id)
            if row is None:
                return None
            row.content = answer.content
            await session.commit()
            await session.refresh(row)
            return Answer.model_validate(row)

        return await self._db.run(op, "update answer")

    async def delete(self, answer_id: AnswerId) -> bool:
        async def op(session: AsyncSession) -> bool:
            result = await session.execute(
                delete(AnswerRow).where(AnswerRow.id == answer_id),
            )
            await session.commit()
            return result.rowcount > 0

        return await self._db.run(op, "delete answer")

    async def list_for_question(self, question_id: QuestionId) -> list[Answer]:
        async def op(session: AsyncSession) -> list[Answer]:
            result = await session.execute(
                select(AnswerRow)
                .where(AnswerRow.question_id == question_id)
                .order_by(AnswerRow.id),
            )
            return [Answer.model_validate(row) for row in result.scalars()]

        return await self._db.run(op, "list answers for question")


@dataclass(frozen=True)
class Store:
    """Storage client handed to every route: session manager plus repositories."""
    db: DatabaseSessionManager
    questions: SqlQuestionRepository
    answers: SqlAnswerRepository

    @classmethod
    def from_manager(cls, db: DatabaseSessionManager) -> "Store":
        return cls(
            db=db,
            questions=SqlQuestionRepository(db),
            answers=SqlAnswerRepository(db),
        )
