"""FastAPI application factory wiring routes, services, and the shared connection pool."""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from roomchat.api import routes_health, routes_message, routes_room, routes_user
from roomchat.core.config import settings
from roomchat.core.db import Base, build_engine, build_session_factory
from roomchat.core.errors import MissingDataError
from roomchat.models import chat_room, user  # noqa: F401 - ensure models are registered
from roomchat.repositories.chat_room_repository import ChatRoomRepository
from roomchat.repositories.user_repository import UserRepository
from roomchat.schemas.common import SqlResult
from roomchat.services.message_service import MessageService
from roomchat.services.room_service import RoomService
from roomchat.services.user_service import UserService

LOGGER = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    engine = engine or build_engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        LOGGER.info("Chat backend ready on %s", engine.url.render_as_string(hide_password=True))
        yield
        engine.dispose()
        LOGGER.info("Connection pool disposed")

    app = FastAPI(title="Room Chat Backend", version="0.1.0", lifespan=lifespan)

    # Initialize persistence and services
    user_repo = UserRepository()
    room_repo = ChatRoomRepository()

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.user_service = UserService(user_repo)
    app.state.room_service = RoomService(room_repo)
    app.state.message_service = MessageService(room_repo)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_user.router)
    app.include_router(routes_room.router)
    app.include_router(routes_message.router)
    app.include_router(routes_health.router)

    @app.exception_handler(MissingDataError)
    async def missing_data_handler(request: Request, exc: MissingDataError) -> JSONResponse:
        LOGGER.error("❌ %s on %s (room_id=%s)", exc.kind, request.url.path, exc.room_id)
        body = SqlResult[None](message=exc.public_message, data=None)
        return JSONResponse(status_code=500, content=body.model_dump())

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app


def run() -> None:
    uvicorn.run("roomchat.main:app", host=settings.API_HOST, port=settings.API_PORT)


app = create_app()
