"""Pydantic Schemas - request/response contracts for the invite API.

Invariants:
    - Wire names stay camelCase where existing clients expect them
    - Schemas are API contracts, models are persistence
"""
