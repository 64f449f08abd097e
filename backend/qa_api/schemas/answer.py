"""Answer Schemas — request and response shapes for /answers."""

from pydantic import BaseModel, ConfigDict, Field

from qa_api.core.domain_types import INT32_MAX


class NewAnswer(BaseModel):
    """Answer creation payload; question_id must reference an existing question."""
    content: str
    question_id: int = Field(le=INT32_MAX)


class Answer(NewAnswer):
    """Stored answer. On PUT only `content` is applied."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(le=INT32_MAX)
