"""Services Layer — async orchestration around the ContentRepository boundary.

Invariants:
    - Services await the repository, then hand results to pure core functions
    - Repository errors are never caught or retried here
"""
