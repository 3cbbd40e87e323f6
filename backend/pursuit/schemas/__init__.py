"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Conversion to core dataclasses happens here, never inside routes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
