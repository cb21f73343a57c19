"""ORM Models — SQLAlchemy declarative models for categories and articles.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tables are read by the SQL content repository only; the API never writes

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from learn_api.models.category import CategoryRecord  # noqa: F401
from learn_api.models.article import ArticleRecord, article_categories  # noqa: F401
