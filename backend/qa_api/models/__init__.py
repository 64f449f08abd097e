"""ORM Models — SQLAlchemy declarative models for questions and answers.

Invariants:
    - All models inherit from Base (db/base.py)
    - answers.question_id references questions.id; no ORM-level cascade

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for alembic and create_schema
"""

from qa_api.models.question import Question  # noqa: F401
from qa_api.models.answer import Answer  # noqa: F401
