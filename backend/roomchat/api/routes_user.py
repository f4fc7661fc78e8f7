"""User account API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from roomchat.core.db import get_db
from roomchat.schemas.common import SqlResult
from roomchat.schemas.user import UserCreate, UserDelete, UserOut, UserSearch
from roomchat.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["user"])


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


@router.post("/add", response_model=SqlResult[bool])
def add_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> SqlResult[bool]:
    return user_service.add_user(db, payload)


@router.post("/search", response_model=SqlResult[list[UserOut]])
def search_user(
    payload: UserSearch,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> SqlResult[list[UserOut]]:
    return user_service.search_user(db, payload)


@router.post("/delete", response_model=SqlResult[int])
def delete_user(
    payload: UserDelete,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> SqlResult[int]:
    return user_service.delete_user(db, payload)
