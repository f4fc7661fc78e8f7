"""Failure kinds that abort a request instead of producing a regular envelope."""
from __future__ import annotations

from roomchat.core import messages


class MissingDataError(Exception):
    """Data that must exist for the request to make sense is absent."""

    kind = "missing_data"
    public_message = ""

    def __init__(self, room_id: int) -> None:
        super().__init__(f"{self.kind}: room_id={room_id}")
        self.room_id = room_id


class RoomNotFoundError(MissingDataError):
    kind = "room_not_found"
    public_message = messages.ROOM_MISSING


class MessageUnsetError(MissingDataError):
    kind = "message_unset"
    public_message = messages.MESSAGE_UNSET
