"""Services Layer — one orchestration function per route.

Invariants:
    - Every service returns a fully built Envelope or raises QAError
    - Services never build error responses themselves
"""
