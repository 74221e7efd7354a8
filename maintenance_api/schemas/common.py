"""Shared Pydantic schema base."""

from __future__ import annotations

from pydantic import BaseModel


class ApiModel(BaseModel):
    """All API schemas inherit from this; field names go on the wire as-is (snake_case)."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
    database: bool


# Ids are BIGINT-sized in the store
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
