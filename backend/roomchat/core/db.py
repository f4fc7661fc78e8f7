"""Database setup for SQLAlchemy sessions and engine."""
from __future__ import annotations

from typing import Any, Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings, settings

Base = declarative_base()


def build_engine(url: str | None = None, config: Settings = settings) -> Engine:
    """Create the shared connection pool with bounded waits for the given URL."""
    url_obj = make_url(url or config.sqlalchemy_url())
    timeout = config.DB_STATEMENT_TIMEOUT_SECONDS
    options: dict[str, Any] = {"pool_pre_ping": True}

    if url_obj.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False, "timeout": timeout}
        if url_obj.database in (None, "", ":memory:"):
            # a single shared connection, otherwise every checkout sees an empty database
            options["poolclass"] = StaticPool
    else:
        options["pool_size"] = config.DB_POOL_SIZE
        options["pool_timeout"] = config.DB_POOL_TIMEOUT_SECONDS
        if url_obj.get_driver_name() == "pymysql":
            options["connect_args"] = {
                "connect_timeout": timeout,
                "read_timeout": timeout,
                "write_timeout": timeout,
            }

    return create_engine(url_obj, **options)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
