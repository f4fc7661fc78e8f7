"""Repository for user persistence and retrieval."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roomchat.models.user import User
from roomchat.repositories.outcome import Failed, Found, NotFound, Outcome, from_rowcount

LOGGER = logging.getLogger(__name__)


class UserRepository:
    def create_user(self, db: Session, user_id: Optional[int], name: str, password: str) -> Outcome[int]:
        """Insert one user row and return the stored id."""
        user = User(id=user_id, name=name, password=password)
        db.add(user)
        try:
            db.flush()
            new_id = user.id
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("INSERT user failed for id=%s: %s", user_id, exc)
            return Failed(str(exc))
        return Found(new_id)

    def find_by_id(self, db: Session, user_id: int) -> Outcome[list[User]]:
        try:
            users = db.query(User).filter(User.id == user_id).all()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("SELECT user failed for id=%s: %s", user_id, exc)
            return Failed(str(exc))
        if not users:
            return NotFound()
        return Found(users)

    def delete_matching(self, db: Session, user_id: int, name: str, password: str) -> Outcome[int]:
        try:
            deleted = (
                db.query(User)
                .filter(User.id == user_id, User.name == name, User.password == password)
                .delete(synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DELETE user failed for id=%s: %s", user_id, exc)
            return Failed(str(exc))
        return from_rowcount(deleted)
