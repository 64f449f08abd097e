"""Question Routes — /questions collection and item endpoints.

Invariants:
    - Path ids are 32-bit ints; anything else fails as InvalidIdShape before the handler
    - The raw query map is handed to the pagination validator untouched
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from qa_api.api.dependencies import get_moderation, get_store, question_path_id
from qa_api.core.domain_types import QuestionId
from qa_api.core.repository_protocols import ModerationGate
from qa_api.infrastructure.repositories import Store
from qa_api.schemas.envelope import Envelope
from qa_api.schemas.question import NewQuestion, Question
from qa_api.services import answers as answer_service
from qa_api.services import questions as question_service

router = APIRouter(tags=["questions"])

QuestionPathId = Annotated[QuestionId, Depends(question_path_id)]


@router.get("/questions", response_model=Envelope)
async def get_questions(request: Request, store: Store = Depends(get_store)):
    """List questions, paginated by ?start&end&limit&offset."""
    return await question_service.list_questions(
        store.questions, dict(request.query_params),
    )


@router.post("/questions", response_model=Envelope)
async def add_question(
    body: NewQuestion,
    store: Store = Depends(get_store),
    moderation: ModerationGate = Depends(get_moderation),
):
    """Moderate, then store a new question."""
    return await question_service.add_question(store.questions, moderation, body)


@router.get("/questions/{question_id}", response_model=Envelope)
async def get_question(qid: QuestionPathId, store: Store = Depends(get_store)):
    return await question_service.get_question(store.questions, qid)


@router.put("/questions/{question_id}", response_model=Envelope)
async def update_question(
    qid: QuestionPathId, body: Question, store: Store = Depends(get_store),
):
    return await question_service.update_question(store.questions, qid, body)


@router.delete("/questions/{question_id}", response_model=Envelope)
async def delete_question(qid: QuestionPathId, store: Store = Depends(get_store)):
    return await question_service.delete_question(store.questions, qid)


@router.get("/questions/{question_id}/answers", response_model=Envelope)
async def get_answers_for_question(
    qid: QuestionPathId, store: Store = Depends(get_store),
):
    return await answer_service.list_answers_for_question(store.answers, qid)
