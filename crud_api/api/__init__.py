"""API Layer — FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies (except 204 responses)

Design Decisions:
    - Thin routes delegate to the store; validation rules come from core/
"""
