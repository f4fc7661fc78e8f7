"""SQLAlchemy model for chat rooms with append-only JSON lists."""
from __future__ import annotations

from sqlalchemy import JSON, Column, String

from roomchat.core.db import Base
from roomchat.models.user import ID_TYPE


class ChatRoom(Base):
    __tablename__ = "chat_room"

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)
    # NULL until the first message; none_as_null keeps it a real SQL NULL
    message = Column(JSON(none_as_null=True), nullable=True)
    user_list = Column(JSON(none_as_null=True), nullable=True, default=list)
