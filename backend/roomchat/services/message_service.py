"""Message service: polling reads and unauthenticated appends."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from roomchat.core import messages
from roomchat.core.errors import MessageUnsetError, RoomNotFoundError
from roomchat.repositories.chat_room_repository import ChatRoomRepository
from roomchat.repositories.outcome import Failed, Found
from roomchat.schemas.common import SqlResult
from roomchat.schemas.room import MessageSend

LOGGER = logging.getLogger(__name__)


class MessageService:
    def __init__(self, room_repository: ChatRoomRepository) -> None:
        self.room_repository = room_repository

    def get_messages(self, db: Session, room_id: int) -> SqlResult[list[str]]:
        """Return the room's messages.

        Raises RoomNotFoundError when no room has this id and MessageUnsetError
        when the room exists but nothing was ever sent to it.
        """
        outcome = self.room_repository.get_messages(db, room_id)
        if isinstance(outcome, Failed):
            return SqlResult[list[str]](message=messages.MESSAGE_FETCH_FAILED, data=None)
        if not isinstance(outcome, Found):
            raise RoomNotFoundError(room_id)
        if outcome.value is None:
            raise MessageUnsetError(room_id)
        return SqlResult[list[str]](message=messages.MESSAGE_FETCHED, data=list(outcome.value))

    def send_message(self, db: Session, payload: MessageSend) -> SqlResult[bool]:
        outcome = self.room_repository.append_message(db, payload.room_id, payload.text)
        if isinstance(outcome, Found):
            return SqlResult[bool](message=messages.MESSAGE_SENT, data=True)
        if isinstance(outcome, Failed):
            return SqlResult[bool](message=messages.MESSAGE_SEND_FAILED, data=None)
        LOGGER.info("Message dropped, no room with id=%s", payload.room_id)
        return SqlResult[bool](message=messages.MESSAGE_SEND_NOT_FOUND, data=False)
