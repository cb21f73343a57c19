"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Lookups return None on a miss; raising NotFoundError is the resolver's job
    - get_articles_by_category returns exactly one page of rows plus the full count

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; core functions that consume the
      results stay synchronous and the services layer does the awaiting
"""

from collections.abc import Mapping
from typing import Protocol

from learn_api.core.content_types import Article, ArticlePage, Category


class ContentRepository(Protocol):
    """Contract for category and article reads — implemented by shell."""
    async def list_categories(self) -> list[Category]: ...
    async def get_category_by_id(self, category_id: int) -> Category | None: ...
    async def get_category_by_slug(self, slug: str) -> Category | None: ...
    async def get_articles_by_category(
        self, category_slug: str, page: int, limit: int,
    ) -> ArticlePage: ...
    async def get_article_by_id(self, article_id: int) -> Article | None: ...
    async def get_article_by_slug(self, slug: str) -> Article | None: ...
    async def get_article_by_path(
        self, category_path: str, article_slug: str,
    ) -> Article | None: ...


class Authorizer(Protocol):
    """Contract for capability checks — decision logic lives outside this service."""
    async def allows(self, capability: str, headers: Mapping[str, str]) -> bool: ...
