"""API Dependencies — request-scoped service construction and capability gate.

Invariants:
    - One LearnService per request, bound to that request's DB session
    - A route's capability is checked before its handler runs
    - No authorizer on app.state → every capability is granted

Design Decisions:
    - Authorization decisions are delegated to an Authorizer set on app.state
      by the deployment; this module only asks and maps "no" to AccessDeniedError
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from learn_api.config import get_settings
from learn_api.core.errors import AccessDeniedError
from learn_api.core.pagination import ArticlePaginator
from learn_api.infrastructure.database import get_db
from learn_api.infrastructure.sql_content_repository import SqlContentRepository
from learn_api.services.learn_service import LearnService

logger = logging.getLogger(__name__)


def get_learn_service(db: AsyncSession = Depends(get_db)) -> LearnService:
    """FastAPI dependency building the service over the SQL repository."""
    settings = get_settings()
    return LearnService(
        SqlContentRepository(db, settings.app_url),
        ArticlePaginator(
            default_limit=settings.pagination_default_limit,
            max_limit=settings.pagination_max_limit,
        ),
        article_path_marker=settings.article_path_marker,
    )


def require_capability(capability: str):
    """Build a dependency that rejects callers lacking `capability`."""

    async def check_capability(request: Request) -> None:
        authorizer = getattr(request.app.state, "authorizer", None)
        if authorizer is None:
            return
        if not await authorizer.allows(capability, request.headers):
            logger.info(
                f"Capability '{capability}' denied",
                extra={"path": request.url.path},
            )
            raise AccessDeniedError(capability)

    return check_capability
