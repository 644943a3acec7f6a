"""Users CRUD API — in-memory user service behind a static API key.

Invariants:
    - Package root holds only the version (import side-effects prohibited)

Design Decisions:
    - No star exports: explicit imports from submodules only
"""

__version__ = "1.0.0"
