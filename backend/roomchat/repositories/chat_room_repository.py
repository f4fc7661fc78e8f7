"""Repository for chat rooms and their append-only message and member lists."""
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roomchat.models.chat_room import ChatRoom
from roomchat.repositories.outcome import Failed, Found, NotFound, Outcome, from_rowcount

LOGGER = logging.getLogger(__name__)


def json_append(db: Session, column, value: Any):
    """SQL expression appending ``value`` to a JSON array column, NULL counting as empty."""
    base = func.coalesce(column, func.json_array())
    if db.get_bind().dialect.name == "sqlite":
        return func.json_insert(base, "$[#]", value)
    return func.json_array_append(base, "$", value)


class ChatRoomRepository:
    def create_room(self, db: Session, name: str, password: str) -> Outcome[int]:
        room = ChatRoom(name=name, password=password, message=None, user_list=[])
        db.add(room)
        try:
            db.flush()
            room_id = room.id
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("INSERT chat_room failed for name=%s: %s", name, exc)
            return Failed(str(exc))
        return Found(room_id)

    def append_member(self, db: Session, room_id: int, name: str, password: str, user_id: int) -> Outcome[int]:
        """Append ``user_id`` to the room only when id, name and password all match."""
        try:
            updated = (
                db.query(ChatRoom)
                .filter(ChatRoom.id == room_id, ChatRoom.name == name, ChatRoom.password == password)
                .update({ChatRoom.user_list: json_append(db, ChatRoom.user_list, user_id)}, synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("UPDATE chat_room.user_list failed for room=%s user=%s: %s", room_id, user_id, exc)
            return Failed(str(exc))
        return from_rowcount(updated)

    def append_message(self, db: Session, room_id: int, text: str) -> Outcome[int]:
        try:
            updated = (
                db.query(ChatRoom)
                .filter(ChatRoom.id == room_id)
                .update({ChatRoom.message: json_append(db, ChatRoom.message, text)}, synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("UPDATE chat_room.message failed for room=%s (len=%s): %s", room_id, len(text), exc)
            return Failed(str(exc))
        return from_rowcount(updated)

    def get_messages(self, db: Session, room_id: int) -> Outcome[Optional[list[str]]]:
        """Found carries the raw column value, which is None before the first message."""
        try:
            row = db.query(ChatRoom.message).filter(ChatRoom.id == room_id).one_or_none()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("SELECT chat_room.message failed for room=%s: %s", room_id, exc)
            return Failed(str(exc))
        if row is None:
            return NotFound()
        return Found(row.message)
