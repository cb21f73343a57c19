"""Database Metadata — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - Single Base per process; tests create tables from Base.metadata
"""
