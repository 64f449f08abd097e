"""Boundary Protocols — storage and moderation contracts used by the services.

Invariants:
    - Services reach storage ONLY through these Protocols
    - Each method is one atomic single-row (or single-query) operation
    - Missing rows are signalled by None / False, never by raising
    - Storage failures raise QAError(DATABASE_QUERY_ERROR)
    - Referential integrity for answers is checked by the caller, not here

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from qa_api.core.domain_types import AnswerId, QuestionId
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.question import NewQuestion, Question


class QuestionRepository(Protocol):
    """Contract for question persistence, implemented by infrastructure."""
    async def list_all(self, limit: int | None, offset: int) -> list[Question]: ...
    async def get_by_id(self, question_id: QuestionId) -> Question | None: ...
    async def create(self, new_question: NewQuestion) -> Question: ...
    async def replace(
        self, question_id: QuestionId, question: Question,
    ) -> Question | None: ...
    async def delete(self, question_id: QuestionId) -> bool: ...


class AnswerRepository(Protocol):
    """Contract for answer persistence, implemented by infrastructure."""
    async def list_all(self) -> list[Answer]: ...
    async def get_by_id(self, answer_id: AnswerId) -> Answer | None: ...
    async def create(self, new_answer: NewAnswer) -> Answer: ...
    async def replace(self, answer_id: AnswerId, answer: Answer) -> Answer | None: ...
    async def delete(self, answer_id: AnswerId) -> bool: ...
    async def list_for_question(self, question_id: QuestionId) -> list[Answer]: ...


class ModerationGate(Protocol):
    """Contract for the content check run before a question is stored."""
    async def check(self, content: str) -> str: ...
