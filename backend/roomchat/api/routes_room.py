"""Chat room API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from roomchat.core.db import get_db
from roomchat.schemas.common import SqlResult
from roomchat.schemas.room import RoomCreate, RoomEnter
from roomchat.services.room_service import RoomService

router = APIRouter(prefix="/room", tags=["room"])


def get_room_service(request: Request) -> RoomService:
    return request.app.state.room_service


@router.post("/create", response_model=SqlResult[bool])
def create_room(
    payload: RoomCreate,
    db: Session = Depends(get_db),
    room_service: RoomService = Depends(get_room_service),
) -> SqlResult[bool]:
    return room_service.create_room(db, payload)


@router.post("/enter", response_model=SqlResult[bool])
def enter_room(
    payload: RoomEnter,
    db: Session = Depends(get_db),
    room_service: RoomService = Depends(get_room_service),
) -> SqlResult[bool]:
    return room_service.enter_room(db, payload)
