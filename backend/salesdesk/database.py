"""
SalesDesk API — Pooled Database Access
=======================================

What:  Async SQLAlchemy engine wrapper, declarative base, and FastAPI dependency.
How:   A `Database` owns one async engine with a bounded connection pool.
       Every call checks out one connection, runs exactly one statement
       with bound parameters, commits and returns the connection to the pool.
Who:   Created by the application lifespan; injected into route handlers via
       the `get_database` dependency.
When:  One instance per process. Connections are held only for the duration
       of a single statement.

Connection Pooling Strategy:
    pool_size=settings.db_pool_size (default 5), max_overflow=0:
        the pool never grows past its configured capacity; callers wait
        (up to pool_timeout seconds) for a free connection.
    pool_pre_ping:     validates connections before use
    pool_recycle=3600: recycles connections every hour

Error Policy:
    Any SQLAlchemyError (checkout timeout, connectivity, execution,
    integrity) is logged and re-raised as DatabaseError. No retries.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import Executable

from salesdesk.config import Settings
from salesdesk.exceptions import DatabaseError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for the table models.

    The tables are owned by the database; the models only describe the
    columns so statements are built from column objects.
    """
    pass


class Database:
    """
    Process-scoped connection pool plus single-statement helpers.

    Responsibilities:
        - fetch_all(): rows of a SELECT as plain dicts
        - fetch_one(): first row of a SELECT or None
        - execute():   INSERT/UPDATE/DELETE, returns affected row count
        - ping():      liveness probe for /health
        - dispose():   drain the pool at shutdown

    Each helper uses `engine.begin()`, which checks a connection out of the
    pool, commits on success, rolls back on error and always checks the
    connection back in before the coroutine returns or raises.
    """

    def __init__(
        self,
        url: URL | str,
        *,
        pool_size: int = 5,
        pool_timeout: int = 30,
        echo: bool = False,
    ) -> None:
        self._engine: AsyncEngine = create_async_engine(
            url,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
            hide_parameters=True,
            echo=echo,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the pool from application settings."""
        return cls(
            settings.sqlalchemy_url,
            pool_size=settings.db_pool_size,
            pool_timeout=settings.db_pool_timeout,
            echo=settings.log_level == "DEBUG",
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def fetch_all(self, statement: Executable) -> List[Dict[str, Any]]:
        """Run a SELECT and return every row as a dict keyed by column name."""
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            raise self._wrap(e, statement) from e

    async def fetch_one(self, statement: Executable) -> Optional[Dict[str, Any]]:
        """Run a SELECT and return the first row, or None when it is empty."""
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                row = result.mappings().first()
                return dict(row) if row is not None else None
        except SQLAlchemyError as e:
            raise self._wrap(e, statement) from e

    async def execute(self, statement: Executable) -> int:
        """Run a write statement and return the number of affected rows."""
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                return result.rowcount
        except SQLAlchemyError as e:
            raise self._wrap(e, statement) from e

    async def ping(self) -> bool:
        """SELECT 1 against the pool. Never raises."""
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()

    @staticmethod
    def _wrap(error: SQLAlchemyError, statement: Executable) -> DatabaseError:
        # Only the statement kind and the driver error are logged; the engine
        # is created with hide_parameters so bound values never appear.
        kind = type(statement).__name__
        detail = getattr(error, "orig", None) or error
        logger.error("Database error during %s: %s: %s", kind, type(error).__name__, detail)
        return DatabaseError(
            context={"statement": kind, "error_type": type(error).__name__},
        )


# ── Dependency ────────────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """
    FastAPI dependency returning the process-wide Database.

    The instance is created in the lifespan and stored on app.state; tests
    replace it through app.dependency_overrides.
    """
    return request.app.state.database
