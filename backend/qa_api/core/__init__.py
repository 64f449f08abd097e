"""Core Layer — error taxonomy, pagination rules and storage contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions here do no IO
"""
