"""Pydantic Schemas — wire shapes for questions, answers and the response envelope.

Invariants:
    - Schemas validate at the system boundary (request bodies, response payloads)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
