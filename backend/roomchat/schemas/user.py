"""Pydantic schemas for user account requests."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from roomchat.schemas.common import BIGINT_MAX, BIGINT_MIN


class UserCreate(BaseModel):
    id: Optional[int] = Field(
        default=None,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        description="Client-chosen id; assigned by the database when omitted",
    )
    name: str
    password: str


class UserSearch(BaseModel):
    id: int = Field(ge=BIGINT_MIN, le=BIGINT_MAX)
    name: Optional[str] = Field(default=None, description="Accepted for compatibility, not used in the lookup")


class UserDelete(BaseModel):
    id: int = Field(ge=BIGINT_MIN, le=BIGINT_MAX)
    name: str
    password: str


class UserOut(BaseModel):
    id: int
    name: str
    password: str

    model_config = ConfigDict(from_attributes=True)
