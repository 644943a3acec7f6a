"""Infrastructure Layer — stateful adapters and cross-cutting concerns.

Invariants:
    - Adapters depend on core/ contracts (errors, protocols), never on api/
    - Shared mutable state lives here, behind an object that owns its lock

Design Decisions:
    - In-memory store instead of a database: state resets on restart
"""
