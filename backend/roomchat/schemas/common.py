"""Common/shared schemas."""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

# ids are stored as signed 64-bit BIGINT
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class HealthStatus(BaseModel):
    status: str = "ok"
    database: str = "ok"


class SqlResult(BaseModel, Generic[T]):
    """Envelope wrapping every response: a human-readable outcome plus optional payload."""

    message: str
    data: Optional[T] = None
