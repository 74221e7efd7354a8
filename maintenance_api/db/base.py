"""Async SQLAlchemy engine wrapper, startup connection provider, and FastAPI dependency."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from maintenance_api.core.exceptions import DatabaseError, DatabaseNotInitializedError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared connection handle
# ---------------------------------------------------------------------------
class Database:
    """Shared handle over the engine's connection pool.

    Each call runs exactly one statement. Reads use a plain connection;
    writes run in their own transaction and are committed on success.
    SQLAlchemy errors are logged with their detail and re-raised as
    :class:`DatabaseError`.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def fetch_all(self, statement: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text(statement), params or {})
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error("DB query error: %s", e)
            raise DatabaseError("query") from e

    async def fetch_one(self, statement: str, params: dict[str, Any] | None = None) -> dict[str, Any] | None:
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text(statement), params or {})
                row = result.mappings().first()
                return dict(row) if row is not None else None
        except SQLAlchemyError as e:
            logger.error("DB query error: %s", e)
            raise DatabaseError("query") from e

    async def execute(self, statement: str, params: dict[str, Any] | None = None) -> int:
        """Run a write statement in its own transaction; return the affected row count."""
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(statement), params or {})
                return result.rowcount
        except SQLAlchemyError as e:
            logger.error("DB exec error: %s", e)
            raise DatabaseError("execute") from e

    async def ping(self) -> bool:
        """Check database connectivity (for startup and readiness probes)."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error("DB health check failed: %s", e)
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# ---------------------------------------------------------------------------
# Connection provider
# ---------------------------------------------------------------------------
@dataclass
class ConnectionResult:
    """Outcome of :func:`acquire`: either a live handle or the error that prevented it."""

    database: Database | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.database is not None


async def acquire(database_url: str, **engine_options: Any) -> ConnectionResult:
    """Create the engine and verify the store answers a liveness query.

    Never retries. The caller decides what a failed result means.
    """
    engine_kwargs: dict[str, Any] = {"pool_pre_ping": True, **engine_options}
    # SQLite (local dev) doesn't support connection pooling parameters
    if database_url.startswith("sqlite"):
        engine_kwargs.pop("pool_size", None)
        engine_kwargs.pop("max_overflow", None)
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    try:
        engine = create_async_engine(database_url, **engine_kwargs)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        logger.error("Error opening database: %s", e)
        return ConnectionResult(error=e)

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Cannot connect to database: %s", e)
        await engine.dispose()
        return ConnectionResult(error=e)

    logger.info("Successfully connected to database!")
    return ConnectionResult(database=Database(engine))


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
def get_database(request: Request) -> Database:
    """Return the shared handle, or fail with 500 if startup never set it."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseNotInitializedError()
    return database
