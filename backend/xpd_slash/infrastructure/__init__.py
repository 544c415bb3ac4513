"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure maps its own failures (DatabaseError) or absorbs them (follow-up delivery)
    - All external calls carry a timeout

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
