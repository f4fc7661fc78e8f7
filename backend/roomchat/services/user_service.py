"""User account service: registration, lookup and credential-checked deletion."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from roomchat.core import messages
from roomchat.repositories.outcome import Failed, Found
from roomchat.repositories.user_repository import UserRepository
from roomchat.schemas.common import SqlResult
from roomchat.schemas.user import UserCreate, UserDelete, UserOut, UserSearch

LOGGER = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def add_user(self, db: Session, payload: UserCreate) -> SqlResult[bool]:
        outcome = self.user_repository.create_user(db, payload.id, payload.name, payload.password)
        LOGGER.info("add_user result: %r", outcome)
        if isinstance(outcome, Found):
            return SqlResult[bool](message=messages.USER_ADDED, data=True)
        return SqlResult[bool](message=messages.USER_ADD_FAILED, data=False)

    def search_user(self, db: Session, payload: UserSearch) -> SqlResult[list[UserOut]]:
        outcome = self.user_repository.find_by_id(db, payload.id)
        if isinstance(outcome, Found):
            users = [UserOut.model_validate(user) for user in outcome.value]
            return SqlResult[list[UserOut]](message=messages.USER_FOUND, data=users)
        if isinstance(outcome, Failed):
            return SqlResult[list[UserOut]](message=messages.USER_SEARCH_FAILED, data=[])
        return SqlResult[list[UserOut]](message=messages.USER_NOT_FOUND, data=[])

    def delete_user(self, db: Session, payload: UserDelete) -> SqlResult[int]:
        outcome = self.user_repository.delete_matching(db, payload.id, payload.name, payload.password)
        LOGGER.info("delete_user result: %r", outcome)
        if isinstance(outcome, Found):
            return SqlResult[int](message=messages.USER_DELETED, data=outcome.value)
        if isinstance(outcome, Failed):
            return SqlResult[int](message=messages.USER_DELETE_FAILED, data=0)
        return SqlResult[int](message=messages.USER_DELETE_NOT_FOUND, data=0)
