"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Response schemas read straight from ORM objects (from_attributes)
    - Update schemas are all-optional; only fields the client sent are applied

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Create bodies go through the rule pipeline (core/rule_sets.py), not pydantic,
      so clients get the single-message 400 contract
"""
