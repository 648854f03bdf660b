"""Pydantic Schemas — form validation and view models for API responses.

Invariants:
    - Schemas validate at system boundary (form input, API responses)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
