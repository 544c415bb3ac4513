"""Pydantic Schemas — the Discord interaction wire format.

Invariants:
    - Schemas validate at system boundary (verified webhook bodies, outbound payloads)
    - Domain enums from core/ used for discriminator fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
