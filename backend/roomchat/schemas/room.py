"""Pydantic schemas for chat room and message requests."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from roomchat.schemas.common import BIGINT_MAX, BIGINT_MIN


class RoomBase(BaseModel):
    room_name: str
    password: str


class RoomCreate(RoomBase):
    # same request shape as RoomEnter; both ids are ignored on creation
    room_id: Optional[int] = Field(
        default=None, ge=BIGINT_MIN, le=BIGINT_MAX, description="Ignored, the database assigns the id"
    )
    user_id: Optional[int] = Field(default=None, ge=BIGINT_MIN, le=BIGINT_MAX, description="Ignored on creation")


class RoomEnter(RoomBase):
    room_id: int = Field(ge=BIGINT_MIN, le=BIGINT_MAX)
    user_id: int = Field(ge=BIGINT_MIN, le=BIGINT_MAX)


class MessageSend(BaseModel):
    text: str
    room_id: int = Field(ge=BIGINT_MIN, le=BIGINT_MAX)
