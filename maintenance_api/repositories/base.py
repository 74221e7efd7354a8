"""Base repository over the shared :class:`Database` handle."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from maintenance_api.core.exceptions import DatabaseError
from maintenance_api.db.base import Database

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class BaseRepository(Generic[SchemaT]):
    """Runs one parameterized statement per call and converts rows to ``schema``.

    Rows that don't fit the schema (the equivalent of a failed scan) raise
    :class:`DatabaseError`, same as a failed query.
    """

    schema: type[SchemaT]

    def __init__(self, db: Database):
        self._db = db

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _to_schema(self, row: dict[str, Any]) -> SchemaT:
        try:
            return self.schema.model_validate(row)
        except ValidationError as e:
            logger.error("Error scanning %s row: %s", self.schema.__name__, e)
            raise DatabaseError("scan") from e

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def _fetch_all(self, statement: str, **params: Any) -> list[SchemaT]:
        rows = await self._db.fetch_all(statement, params)
        return [self._to_schema(row) for row in rows]

    async def _fetch_one(self, statement: str, **params: Any) -> SchemaT | None:
        row = await self._db.fetch_one(statement, params)
        return self._to_schema(row) if row is not None else None

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def _execute(self, statement: str, **params: Any) -> int:
        return await self._db.execute(statement, params)
