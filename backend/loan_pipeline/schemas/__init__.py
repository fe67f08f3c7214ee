"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape only; required-field business rules stay in core/validate_fields.py
    - Domain enums from core/ used for status fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
