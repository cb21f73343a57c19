"""SQL Content Repository — ContentRepository implementation over SQLAlchemy.

Invariants:
    - Read-only: never adds, updates or deletes rows
    - Only published articles are returned
    - The category listing only includes categories with article_count > 0
    - Single-category lookups return the category with its full subtree attached
    - get_article_by_path matches only when the article is filed under a category
      whose full root-to-leaf path equals the requested path
    - get_article_by_slug ignores categories; repeated slugs resolve to the lowest id
    - Misses return None; the resolver turns them into NotFoundError

Design Decisions:
    - Category paths are computed in Python from one full category read
      (core/category_tree.py), so cycles surface as InvalidHierarchyError
      instead of unbounded recursive queries
    - Listing runs a COUNT and a LIMIT/OFFSET query; the service never slices.
      An offset at or past the count skips the row query, so an unbounded page
      number never reaches the driver
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from learn_api.core.article_builder import (
    build_article_url, build_images, build_location, build_seo, build_sponsor,
)
from learn_api.core.category_tree import (
    build_category_tree, category_path_of, deepest_category_path,
    find_category, index_categories,
)
from learn_api.core.content_types import (
    Article, ArticleAuthor, ArticleCategoryRef, ArticlePage, Category,
    PaginationRequest,
)
from learn_api.core.domain_types import PublishStatus
from learn_api.models.article import ArticleRecord, article_categories
from learn_api.models.category import CategoryRecord

logger = logging.getLogger(__name__)


class SqlContentRepository:
    """Reads categories and articles for one request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession, app_url: str):
        self._db = db
        self._app_url = app_url

    # ─── Categories ──────────────────────────────────────────────

    async def list_categories(self) -> list[Category]:
        result = await self._db.execute(
            select(CategoryRecord)
            .where(CategoryRecord.article_count > 0)
            .order_by(CategoryRecord.name, CategoryRecord.id),
        )
        return [_to_category(r) for r in result.scalars().all()]

    async def get_category_by_id(self, category_id: int) -> Category | None:
        forest = build_category_tree(await self._all_categories())
        return find_category(forest, category_id)

    async def get_category_by_slug(self, slug: str) -> Category | None:
        record = await self._first_category_with_slug(slug)
        if record is None:
            return None
        forest = build_category_tree(await self._all_categories())
        return find_category(forest, record.id)

    # ─── Articles ────────────────────────────────────────────────

    async def get_articles_by_category(
        self, category_slug: str, page: int, limit: int,
    ) -> ArticlePage:
        category = await self._first_category_with_slug(category_slug)
        if category is None:
            return ArticlePage(items=[], total=0)

        query = (
            select(ArticleRecord)
            .join(
                article_categories,
                article_categories.c.article_id == ArticleRecord.id,
            )
            .where(
                article_categories.c.category_id == category.id,
                ArticleRecord.status == PublishStatus.PUBLISH.value,
            )
        )
        total = await self._db.scalar(
            select(func.count()).select_from(query.subquery()),
        ) or 0
        offset = PaginationRequest(page=page, limit=limit).offset
        if offset >= total:
            return ArticlePage(items=[], total=total)

        result = await self._db.execute(
            query.order_by(
                ArticleRecord.published_at.desc(), ArticleRecord.id.desc(),
            )
            .offset(offset)
            .limit(limit),
        )
        rows = result.scalars().all()

        index = index_categories(await self._all_categories())
        return ArticlePage(
            items=[self._to_article(r, index) for r in rows],
            total=total,
        )

    async def get_article_by_id(self, article_id: int) -> Article | None:
        result = await self._db.execute(
            select(ArticleRecord).where(
                ArticleRecord.id == article_id,
                ArticleRecord.status == PublishStatus.PUBLISH.value,
            ),
        )
        record = result.scalar_one_or_none()
        if record is None:
            return None
        index = index_categories(await self._all_categories())
        return self._to_article(record, index)

    async def get_article_by_slug(self, slug: str) -> Article | None:
        result = await self._db.execute(
            select(ArticleRecord)
            .where(
                ArticleRecord.slug == slug,
                ArticleRecord.status == PublishStatus.PUBLISH.value,
            )
            .order_by(ArticleRecord.id)
            .limit(1),
        )
        record = result.scalars().first()
        if record is None:
            return None
        index = index_categories(await self._all_categories())
        return self._to_article(record, index)

    async def get_article_by_path(
        self, category_path: str, article_slug: str,
    ) -> Article | None:
        index = index_categories(await self._all_categories())
        leaf_slug = category_path.split("/")[-1]
        category_ids = [
            c.id for c in index.values()
            if c.slug == leaf_slug and category_path_of(c.id, index) == category_path
        ]
        if not category_ids:
            logger.info(
                "No category matches path",
                extra={"category_path": category_path},
            )
            return None

        result = await self._db.execute(
            select(ArticleRecord)
            .join(
                article_categories,
                article_categories.c.article_id == ArticleRecord.id,
            )
            .where(
                article_categories.c.category_id.in_(category_ids),
                ArticleRecord.slug == article_slug,
                ArticleRecord.status == PublishStatus.PUBLISH.value,
            )
            .order_by(ArticleRecord.id)
            .limit(1),
        )
        record = result.scalars().first()
        if record is None:
            return None
        return self._to_article(record, index, category_path=category_path)

    # ─── Helpers ─────────────────────────────────────────────────

    async def _all_categories(self) -> list[Category]:
        result = await self._db.execute(
            select(CategoryRecord).order_by(CategoryRecord.name, CategoryRecord.id),
        )
        return [_to_category(r) for r in result.scalars().all()]

    async def _first_category_with_slug(self, slug: str) -> CategoryRecord | None:
        result = await self._db.execute(
            select(CategoryRecord)
            .where(CategoryRecord.slug == slug)
            .order_by(CategoryRecord.id)
            .limit(1),
        )
        return result.scalars().first()

    def _to_article(
        self,
        record: ArticleRecord,
        index: dict[int, Category],
        category_path: str | None = None,
    ) -> Article:
        if category_path is None:
            category_path = deepest_category_path(
                [c.id for c in record.categories], index,
            )
        meta = record.meta or {}
        return Article(
            id=record.id,
            slug=record.slug,
            url=build_article_url(self._app_url, category_path, record.slug),
            title=record.title,
            excerpt=record.excerpt,
            published_at=record.published_at,
            category_path=tuple(category_path.split("/")) if category_path else (),
            content=record.content,
            images=build_images(record.images, fallback_title=record.title),
            categories=[
                ArticleCategoryRef(id=c.id, name=c.name, slug=c.slug)
                for c in record.categories
            ],
            author=ArticleAuthor(id=record.author_id, name=record.author_name),
            keywords=list(record.keywords or []),
            is_sponsored=record.is_sponsored,
            sponsor=build_sponsor({
                "name": record.sponsor_name,
                "image_url": record.sponsor_image_url,
                "image_sidebar_url": record.sponsor_image_sidebar_url,
                "image_content_url": record.sponsor_image_content_url,
                "extra_data": record.sponsor_extra_data,
            }),
            seo=build_seo(meta, record.title, record.excerpt),
            location=build_location(meta),
        )


def _to_category(record: CategoryRecord) -> Category:
    return Category(
        id=record.id,
        name=record.name,
        slug=record.slug,
        description=record.description,
        parent_id=record.parent_id,
        article_count=record.article_count,
    )
