"""Domain Types — identity types that replace bare ints across the codebase.

Invariants:
    - QuestionId and AnswerId are storage-assigned positive integers
    - Ids are 32-bit signed on the wire and in the database (INT4)
    - Textual ints follow one grammar everywhere: optional sign, ASCII digits, nothing else
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

QuestionId = NewType("QuestionId", int)
AnswerId = NewType("AnswerId", int)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_INT32_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int32(raw: str) -> int:
    """Parse a base-10 32-bit signed integer.

    Rejects whitespace, `_` separators and decimals, which int() would accept.

    Raises:
        ValueError: raw is not a 32-bit integer.
    """
    if not _INT32_PATTERN.fullmatch(raw):
        raise ValueError(f"not an integer: {raw!r}")
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"out of 32-bit range: {raw!r}")
    return value


# ─── Enums ───────────────────────────────────────────────────────

class PayloadKind(str, Enum):
    """Tag of the Envelope data payload, serialized as the single key of `data`."""
    QUESTIONS = "Questions"
    QUESTION = "Question"
    ANSWERS = "Answers"
    ANSWER = "Answer"
