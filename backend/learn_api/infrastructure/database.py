"""Database Session Manager — async engine plus request-scoped read sessions.

Invariants:
    - Every session rolls back on exception and is always closed
    - SQLAlchemy failures leave this module only as DatabaseError (core/errors.py)
    - Driver messages are logged, never put in the DatabaseError message
    - Pool options apply to server databases only; SQLite URLs get the dialect default

Design Decisions:
    - Module-level db_manager set by init_db() from the FastAPI lifespan
    - expire_on_commit=False: ORM rows stay readable after the session ends
    - _FAILURES is checked in order, most specific first
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from learn_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)

_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def _to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for exc_type, message, operation in _FAILURES:
        if isinstance(exc, exc_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            **_engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = _to_database_error(e)
            logger.error(
                f"{type(e).__name__}: {e}",
                extra={"error_code": error.code},
            )
            raise error from e
        finally:
            await session.close()

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
