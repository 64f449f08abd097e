"""Question Schemas — request and response shapes for /questions.

Invariants:
    - NewQuestion.title: stripped, non-empty
    - Question carries the storage-assigned id; on PUT the path id wins over body id
    - tags is an optional unordered set of labels (null allowed)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qa_api.core.domain_types import INT32_MAX


class NewQuestion(BaseModel):
    """Question creation payload (no id)."""
    title: str = Field(min_length=1)
    content: str
    tags: list[str] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class Question(NewQuestion):
    """Stored question, also the full-replace payload for PUT /questions/{id}."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(le=INT32_MAX)
