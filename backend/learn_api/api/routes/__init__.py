"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes its own APIRouter built from a route table
    - Routes never contain business logic (delegate to services)
"""
