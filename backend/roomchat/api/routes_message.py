"""Message polling and sending routes."""
from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.orm import Session

from roomchat.core.db import get_db
from roomchat.schemas.common import BIGINT_MAX, BIGINT_MIN, SqlResult
from roomchat.schemas.room import MessageSend
from roomchat.services.message_service import MessageService

router = APIRouter(prefix="/message", tags=["message"])


def get_message_service(request: Request) -> MessageService:
    return request.app.state.message_service


@router.post("/get", response_model=SqlResult[list[str]])
def get_messages(
    room_id: int = Body(..., ge=BIGINT_MIN, le=BIGINT_MAX, description="Bare room id, not wrapped in an object"),
    db: Session = Depends(get_db),
    message_service: MessageService = Depends(get_message_service),
) -> SqlResult[list[str]]:
    return message_service.get_messages(db, room_id)


@router.post("/send", response_model=SqlResult[bool])
def send_message(
    payload: MessageSend,
    db: Session = Depends(get_db),
    message_service: MessageService = Depends(get_message_service),
) -> SqlResult[bool]:
    return message_service.send_message(db, payload)
