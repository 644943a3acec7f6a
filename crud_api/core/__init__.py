"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Validation functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: validation and the
      error vocabulary are testable without an app or a store
"""
