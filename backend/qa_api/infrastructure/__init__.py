"""Infrastructure Layer — database, moderation client and logging.

Invariants:
    - Infrastructure never builds HTTP responses
    - All external calls bounded by a timeout and mapped to QAError
"""
