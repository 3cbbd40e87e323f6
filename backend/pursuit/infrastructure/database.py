"""Database Session Manager — async engine, short-lived sessions, SQLAlchemy error mapping.

Invariants:
    - A session that raises is rolled back and closed before the error leaves session()
    - Every SQLAlchemyError leaving session() is a DatabaseError (core/errors.py)
    - Pool sizing applies to server databases only; SQLite keeps its dialect default pool
    - Base.metadata is complete at import time (models imported below)

Design Decisions:
    - One manager per process (db_manager), created in the FastAPI lifespan
    - expire_on_commit=False: repositories convert rows to records after commit
    - Error mapping is a table, most specific first, instead of an except ladder
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from pursuit.core.errors import DatabaseError
from pursuit.db.base import Base
import pursuit.models  # noqa: F401

logger = logging.getLogger(__name__)

# (exception type, message, operation); first match wins
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def map_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for exc_type, message, operation in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that never leak partial writes."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as exc:
            await db.rollback()
            mapped = map_database_error(exc)
            logger.error(f"{mapped.message} ({type(exc).__name__}: {exc})")
            raise mapped from exc
        finally:
            await db.close()

    async def create_schema(self) -> None:
        """create_all for missing tables. Server deployments run alembic instead."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except (DatabaseError, OSError) as exc:
            logger.error(f"Database health check failed: {exc}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager

