"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with the Envelope shape

Design Decisions:
    - Thin routes delegate to services
"""
