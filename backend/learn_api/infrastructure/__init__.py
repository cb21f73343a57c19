"""Infrastructure Layer — database access, the SQL content repository and logging.

Invariants:
    - Infrastructure may import core/ types and pure functions, never services/ or api/
    - SQLAlchemy failures surface as DatabaseError

Design Decisions:
    - The SQL repository is one ContentRepository implementation among possible others
"""
