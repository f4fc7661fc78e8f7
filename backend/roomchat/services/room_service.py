"""Chat room service: creation and credential-gated entry."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from roomchat.core import messages
from roomchat.repositories.chat_room_repository import ChatRoomRepository
from roomchat.repositories.outcome import Failed, Found
from roomchat.schemas.common import SqlResult
from roomchat.schemas.room import RoomCreate, RoomEnter

LOGGER = logging.getLogger(__name__)


class RoomService:
    def __init__(self, room_repository: ChatRoomRepository) -> None:
        self.room_repository = room_repository

    def create_room(self, db: Session, payload: RoomCreate) -> SqlResult[bool]:
        outcome = self.room_repository.create_room(db, payload.room_name, payload.password)
        if isinstance(outcome, Found):
            LOGGER.info("Created room id=%s name=%s", outcome.value, payload.room_name)
            return SqlResult[bool](message=messages.ROOM_CREATED, data=True)
        return SqlResult[bool](message=messages.ROOM_CREATE_FAILED, data=False)

    def enter_room(self, db: Session, payload: RoomEnter) -> SqlResult[bool]:
        outcome = self.room_repository.append_member(
            db, payload.room_id, payload.room_name, payload.password, payload.user_id
        )
        if isinstance(outcome, Found):
            LOGGER.info("User %s entered room %s", payload.user_id, payload.room_id)
            return SqlResult[bool](message=messages.ROOM_ENTERED, data=True)
        if isinstance(outcome, Failed):
            return SqlResult[bool](message=messages.ROOM_ENTER_FAILED, data=None)
        LOGGER.info("No room matched id=%s for user %s", payload.room_id, payload.user_id)
        return SqlResult[bool](message=messages.ROOM_ENTER_NOT_FOUND, data=False)
