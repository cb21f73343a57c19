"""Learn Routes — categories, category article listings and article lookups.

Invariants:
    - ROUTES is the single table of path → handler → required capability
    - Every route requires READ_CAPABILITY
    - page/limit arrive as raw text; core/pagination.py owns parsing and clamping
    - The hierarchical article route hands the raw request path to the parser
    - The legacy numeric article route stays available beside the path route
    - /articles/{identifier} dispatches all-digit identifiers to the id lookup,
      anything else to the slug lookup; /articles/id and /articles/slug are explicit

Design Decisions:
    - Static table + one dispatcher (build_router) instead of per-handler
      decorators: routes and their capabilities are reviewable in one place
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from learn_api.api.dependencies import get_learn_service, require_capability
from learn_api.core.domain_types import READ_CAPABILITY
from learn_api.schemas.learn import (
    ArticleListResponse, ArticleResponse, CategoryDetailResponse,
    CategoryListResponse, CategoryResponse,
)
from learn_api.services.learn_service import LearnService

logger = logging.getLogger(__name__)


# ─── Handlers ────────────────────────────────────────────────────

async def list_categories(
    service: LearnService = Depends(get_learn_service),
) -> CategoryListResponse:
    """Root categories with nested children."""
    forest = await service.list_category_tree()
    return CategoryListResponse(
        data=[CategoryResponse.model_validate(c) for c in forest],
        total=len(forest),
    )


async def get_category(
    identifier: str, service: LearnService = Depends(get_learn_service),
) -> CategoryDetailResponse:
    """Category by numeric id or slug."""
    category = await service.get_category(identifier)
    return CategoryDetailResponse(data=CategoryResponse.model_validate(category))


async def list_category_articles(
    category_slug: str,
    page: str | None = Query(None),
    limit: str | None = Query(None),
    service: LearnService = Depends(get_learn_service),
) -> ArticleListResponse:
    """One page of article summaries in a category."""
    listing = await service.list_articles(category_slug, page, limit)
    return ArticleListResponse.model_validate(listing)


async def get_article(
    identifier: str, service: LearnService = Depends(get_learn_service),
) -> ArticleResponse:
    """Article by numeric id or slug."""
    article = await service.get_article(identifier)
    return ArticleResponse.model_validate(article)


async def get_article_by_id(
    article_id: int, service: LearnService = Depends(get_learn_service),
) -> ArticleResponse:
    """Legacy lookup by numeric article id."""
    article = await service.get_article_by_id(article_id)
    return ArticleResponse.model_validate(article)


async def get_article_by_slug(
    slug: str, service: LearnService = Depends(get_learn_service),
) -> ArticleResponse:
    """Article by slug, regardless of category."""
    article = await service.get_article_by_slug(slug)
    return ArticleResponse.model_validate(article)


async def get_article_by_path(
    request: Request,
    article_path: str,
    service: LearnService = Depends(get_learn_service),
) -> ArticleResponse:
    """Article by hierarchical path, e.g. travel-tips/central-america/guatemala-guide."""
    logger.debug(
        "Resolving article by path", extra={"identifier": article_path},
    )
    article = await service.get_article_by_path(request.url.path)
    return ArticleResponse.model_validate(article)


# ─── Route Table ─────────────────────────────────────────────────

@dataclass(frozen=True)
class RouteSpec:
    method: str
    path: str
    endpoint: Callable[..., Any]
    capability: str
    response_model: type
    summary: str


ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec(
        "GET", "/categories", list_categories,
        READ_CAPABILITY, CategoryListResponse, "List category tree",
    ),
    RouteSpec(
        "GET", "/categories/{identifier}", get_category,
        READ_CAPABILITY, CategoryDetailResponse, "Get category by slug or id",
    ),
    RouteSpec(
        "GET", "/categories/{category_slug}/articles", list_category_articles,
        READ_CAPABILITY, ArticleListResponse, "List articles in category",
    ),
    RouteSpec(
        "GET", "/articles/id/{article_id}", get_article_by_id,
        READ_CAPABILITY, ArticleResponse, "Get article by legacy id",
    ),
    RouteSpec(
        "GET", "/articles/slug/{slug}", get_article_by_slug,
        READ_CAPABILITY, ArticleResponse, "Get article by slug",
    ),
    RouteSpec(
        "GET", "/articles/{identifier}", get_article,
        READ_CAPABILITY, ArticleResponse, "Get article by id or slug",
    ),
    RouteSpec(
        "GET", "/article/{article_path:path}", get_article_by_path,
        READ_CAPABILITY, ArticleResponse, "Get article by hierarchical path",
    ),
)


def build_router(routes: tuple[RouteSpec, ...] = ROUTES) -> APIRouter:
    """Register every RouteSpec on a fresh router."""
    router = APIRouter(prefix="/api/v1/learn", tags=["learn"])
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            summary=route.summary,
            dependencies=[Depends(require_capability(route.capability))],
        )
    return router


router = build_router()
