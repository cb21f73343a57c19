"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas shape data at the system boundary only
    - JSON field names are camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
