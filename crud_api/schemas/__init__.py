"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas enforce shape and JSON types only; field rules live in core/
    - Wire format is camelCase, Python attributes are snake_case

Design Decisions:
    - Separate from domain records: schemas are API contracts, core.domain_types
      holds what the store owns
"""
