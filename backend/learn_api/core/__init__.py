"""Core Layer — content hierarchy resolution and pagination, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services/ awaits the
      repository, core/ only shapes the data it returns
"""
