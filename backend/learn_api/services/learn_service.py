"""Learn Service — the read operations of the learn content API.

Invariants:
    - One sequential pass per request: identify → classify → repository lookup
      → (tree build | pagination) → result
    - The category must resolve before its articles are fetched
    - Pagination metadata is computed only after the repository returns the total
    - No state is kept between calls

Design Decisions:
    - Collaborators are explicit constructor parameters (no container wiring)
    - The path route parses before touching the repository, so a malformed path
      never costs a query
"""

import logging

from learn_api.core.article_summary import summarize_article
from learn_api.core.category_tree import build_category_tree
from learn_api.core.content_types import Article, ArticleListing, Category
from learn_api.core.domain_types import ARTICLE_PATH_MARKER
from learn_api.core.pagination import ArticlePaginator
from learn_api.core.path_parser import parse_article_path
from learn_api.core.repository_protocols import ContentRepository
from learn_api.services.identifier_resolver import IdentifierResolver

logger = logging.getLogger(__name__)


class LearnService:
    """Category tree, category lookup, article listing and article lookups."""

    def __init__(
        self,
        repository: ContentRepository,
        paginator: ArticlePaginator | None = None,
        article_path_marker: str = ARTICLE_PATH_MARKER,
    ):
        self._repository = repository
        self._resolver = IdentifierResolver(repository)
        self._paginator = paginator or ArticlePaginator()
        self._marker = article_path_marker

    async def list_category_tree(self) -> list[Category]:
        categories = await self._repository.list_categories()
        return build_category_tree(categories)

    async def get_category(self, identifier: str) -> Category:
        return await self._resolver.resolve_category(identifier)

    async def list_articles(
        self,
        category_slug: str,
        page: str | int | None = None,
        limit: str | int | None = None,
    ) -> ArticleListing:
        request = self._paginator.normalize(page, limit)
        await self._resolver.resolve_category_by_slug(category_slug)

        result = await self._repository.get_articles_by_category(
            category_slug, request.page, request.limit,
        )
        meta = self._paginator.meta(request, result.total)
        logger.debug(
            f"Listed {len(result.items)} articles in '{category_slug}'",
            extra={"page": meta.page, "limit": meta.limit, "total": meta.total},
        )
        return ArticleListing(
            articles=[summarize_article(a) for a in result.items],
            pagination=meta,
        )

    async def get_article_by_id(self, article_id: int) -> Article:
        return await self._resolver.resolve_article_by_id(article_id)

    async def get_article(self, identifier: str) -> Article:
        return await self._resolver.resolve_article(identifier)

    async def get_article_by_slug(self, slug: str) -> Article:
        return await self._resolver.resolve_article_by_slug(slug)

    async def get_article_by_path(self, raw_path: str) -> Article:
        path = parse_article_path(raw_path, self._marker)
        return await self._resolver.resolve_article_by_path(
            path.category_path, path.article_slug,
        )
