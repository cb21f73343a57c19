"""Declarative Base — metadata shared by the category and article tables.

Invariants:
    - CategoryRecord, ArticleRecord and learn_article_categories all register on Base.metadata
    - Tests build their schema with Base.metadata.create_all
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
