"""Pydantic Schemas — request/response DTOs for the HTTP API.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Wire keys are camelCase; Python attributes are snake_case
    - Domain types from core/ used for enum fields and bounds

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
