"""Health check endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roomchat.core.db import get_db
from roomchat.schemas.common import HealthStatus

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus)
def health(db: Session = Depends(get_db)) -> HealthStatus:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        LOGGER.error("Database ping failed: %s", exc)
        return HealthStatus(status="degraded", database="unreachable")
    return HealthStatus(status="ok", database="ok")
