"""Answer Routes — /answers for list/create/get, singular /answer/{id} for update/delete.

Invariants:
    - The /answers vs /answer asymmetry is part of the public contract; keep both
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from qa_api.api.dependencies import answer_path_id, get_store
from qa_api.core.domain_types import AnswerId
from qa_api.infrastructure.repositories import Store
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.envelope import Envelope
from qa_api.services import answers as answer_service

router = APIRouter(tags=["answers"])

AnswerPathId = Annotated[AnswerId, Depends(answer_path_id)]


@router.get("/answers", response_model=Envelope)
async def get_answers(store: Store = Depends(get_store)):
    return await answer_service.list_answers(store.answers)


@router.post("/answers", response_model=Envelope)
async def add_answer(body: NewAnswer, store: Store = Depends(get_store)):
    """Store an answer after checking its question exists."""
    return await answer_service.add_answer(store.answers, store.questions, body)


@router.get("/answers/{answer_id}", response_model=Envelope)
async def get_answer(aid: AnswerPathId, store: Store = Depends(get_store)):
    return await answer_service.get_answer(store.answers, aid)


@router.put("/answer/{answer_id}", response_model=Envelope)
async def update_answer(
    aid: AnswerPathId, body: Answer, store: Store = Depends(get_store),
):
    return await answer_service.update_answer(store.answers, aid, body)


@router.delete("/answer/{answer_id}", response_model=Envelope)
async def delete_answer(aid: AnswerPathId, store: Store = Depends(get_store)):
    return await answer_service.delete_answer(store.answers, aid)
