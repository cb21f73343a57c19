"""Category ORM — persists one node of the learn category hierarchy.

Invariants:
    - id is the integer primary key shared with legacy URLs
    - parent_id 0 (or NULL) marks a root category
    - slug is unique among siblings, not globally
    - article_count is maintained by the publishing system, read-only here

Design Decisions:
    - parent_id is a plain column, not a ForeignKey: the content store may hold
      categories whose parent was deleted, and the tree builder treats those as roots
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from learn_api.db.base import Base


class CategoryRecord(Base):
    """Category row."""
    __tablename__ = "learn_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    parent_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True, default=0, index=True,
    )
    article_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
