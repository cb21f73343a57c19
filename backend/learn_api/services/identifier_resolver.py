"""Identifier Resolver — dispatches identifiers to the right ContentRepository lookup.

Invariants:
    - All-digit identifiers resolve by id, everything else by slug
    - Article-by-path is a strict match on the canonical category path
    - A miss raises NotFoundError; a hit is returned whole (no partial entities)
    - Repository exceptions propagate unchanged (no catch, no retry)
    - The legacy id lookup is independent of path/slug resolution
    - A blank article slug is rejected with ValidationError before any lookup
"""

import logging

from learn_api.core.content_types import Article, Category
from learn_api.core.domain_types import IdentifierKind
from learn_api.core.errors import ErrorContext, NotFoundError, ValidationError
from learn_api.core.identifier import classify_identifier
from learn_api.core.repository_protocols import ContentRepository

logger = logging.getLogger(__name__)


class IdentifierResolver:
    """Resolves category and article identifiers against a ContentRepository."""

    def __init__(self, repository: ContentRepository):
        self._repository = repository

    async def resolve_category(self, identifier: str) -> Category:
        kind = classify_identifier(identifier)
        logger.debug(
            f"Resolving category by {kind.value}",
            extra={"identifier": identifier},
        )
        if kind is IdentifierKind.NUMERIC:
            category = await self._repository.get_category_by_id(int(identifier))
        else:
            category = await self._repository.get_category_by_slug(identifier)

        if category is None:
            raise NotFoundError(
                "Category", identifier, ErrorContext(identifier=identifier),
            )
        return category

    async def resolve_category_by_slug(self, slug: str) -> Category:
        category = await self._repository.get_category_by_slug(slug)
        if category is None:
            raise NotFoundError("Category", slug, ErrorContext(identifier=slug))
        return category

    async def resolve_article_by_path(
        self, category_path: str, article_slug: str,
    ) -> Article:
        article = await self._repository.get_article_by_path(
            category_path, article_slug,
        )
        if article is None:
            raise NotFoundError(
                "Article", f"{category_path}/{article_slug}",
                ErrorContext(category_path=category_path, article_slug=article_slug),
            )
        return article

    async def resolve_article_by_id(self, article_id: int) -> Article:
        article = await self._repository.get_article_by_id(article_id)
        if article is None:
            raise NotFoundError(
                "Article", str(article_id), ErrorContext(identifier=str(article_id)),
            )
        return article

    async def resolve_article(self, identifier: str) -> Article:
        """Article by numeric id or, for anything else, by slug."""
        if classify_identifier(identifier) is IdentifierKind.NUMERIC:
            return await self.resolve_article_by_id(int(identifier))
        return await self.resolve_article_by_slug(identifier)

    async def resolve_article_by_slug(self, slug: str) -> Article:
        if not slug.strip():
            raise ValidationError("Slug cannot be empty", "slug")
        article = await self._repository.get_article_by_slug(slug)
        if article is None:
            raise NotFoundError("Article", slug, ErrorContext(article_slug=slug))
        return article
