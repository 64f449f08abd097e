"""Q&A API Package — questions, answers and the moderation gate.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
