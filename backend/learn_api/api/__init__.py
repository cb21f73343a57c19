"""API Layer — FastAPI route table, dispatcher and error handlers.

Invariants:
    - Routes registered from a static table (no decorator metadata)
    - All error responses share the {statusCode, message, error} shape

Design Decisions:
    - Thin routes delegate to services/learn_service.py
"""
