"""Article ORM — persists a learn article and its category memberships.

Invariants:
    - slug is unique within each category the article is filed under
    - Only status == "publish" rows are ever served
    - images is a JSON list of {original, thumbnail, medium, title, caption}
    - meta is a JSON object of post meta (SEO, location) keyed by meta name

Design Decisions:
    - JSON columns for images/meta: mirrors the key/value post meta of the
      publishing system without a meta table join per article
    - Many-to-many via learn_article_categories: an article may sit in several
      categories; its canonical path is that of the deepest one
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Table, Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learn_api.db.base import Base
from learn_api.core.domain_types import PublishStatus

article_categories = Table(
    "learn_article_categories",
    Base.metadata,
    Column("article_id", ForeignKey("learn_articles.id"), primary_key=True),
    Column("category_id", ForeignKey("learn_categories.id"), primary_key=True),
)


class ArticleRecord(Base):
    """Article row."""
    __tablename__ = "learn_articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PublishStatus.PUBLISH.value,
    )
    published_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    author_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    author_name: Mapped[str] = mapped_column(
        String(200), nullable=False, default="",
    )
    keywords: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    # Sponsorship
    is_sponsored: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    sponsor_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    sponsor_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    sponsor_image_sidebar_url: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    sponsor_image_content_url: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    sponsor_extra_data: Mapped[str | None] = mapped_column(Text, nullable=True)

    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    meta: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    # Relationships
    categories: Mapped[list["CategoryRecord"]] = relationship(
        "CategoryRecord", secondary=article_categories, lazy="selectin",
    )
