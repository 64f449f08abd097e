"""Question ORM — persists questions.

Invariants:
    - id is a serial INT4 primary key assigned by the database
    - title and content are non-nullable text
    - tags is a nullable text[] (JSON on SQLite, used by the test suite)
"""

from sqlalchemy import ARRAY, JSON, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from qa_api.db.base import Base

TagList = ARRAY(Text).with_variant(JSON(), "sqlite")


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list[str] | None] = mapped_column(TagList, nullable=True)
