"""
Unit tests for repositories and the tagged outcome.
"""

from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest
from sqlalchemy import update
from sqlalchemy.dialects import mysql, sqlite

from conftest import BrokenSession
from roomchat.core.db import Base, build_engine, build_session_factory
from roomchat.models.chat_room import ChatRoom
from roomchat.repositories.chat_room_repository import ChatRoomRepository, json_append
from roomchat.repositories.outcome import Failed, Found, NotFound, from_rowcount
from roomchat.repositories.user_repository import UserRepository


@pytest.fixture
def db():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


class TestOutcome:
    """Tests for the rows-affected predicate."""

    def test_rowcount_positive(self):
        assert from_rowcount(2) == Found(2)

    def test_rowcount_zero(self):
        assert from_rowcount(0) == NotFound()


class TestUserRepository:
    """Tests for UserRepository."""

    def test_create_returns_assigned_id(self, db):
        repo = UserRepository()
        assert repo.create_user(db, None, "alice", "pw") == Found(1)
        assert repo.create_user(db, 10, "bob", "pw") == Found(10)

    def test_find_returns_list(self, db):
        repo = UserRepository()
        repo.create_user(db, 3, "alice", "pw")
        outcome = repo.find_by_id(db, 3)
        assert isinstance(outcome, Found)
        assert [(u.id, u.name, u.password) for u in outcome.value] == [(3, "alice", "pw")]

    def test_find_missing(self, db):
        assert UserRepository().find_by_id(db, 3) == NotFound()

    def test_delete_counts_rows(self, db):
        repo = UserRepository()
        repo.create_user(db, 3, "alice", "pw")
        assert repo.delete_matching(db, 3, "alice", "bad") == NotFound()
        assert repo.delete_matching(db, 3, "alice", "pw") == Found(1)

    def test_errors_roll_back(self):
        session = BrokenSession()
        outcome = UserRepository().create_user(session, 1, "alice", "pw")
        assert isinstance(outcome, Failed)
        assert "database is down" in outcome.detail
        assert session.rolled_back


class TestChatRoomRepository:
    """Tests for ChatRoomRepository."""

    def test_message_null_until_first_send(self, db):
        repo = ChatRoomRepository()
        assert repo.create_room(db, "general", "p") == Found(1)
        assert repo.get_messages(db, 1) == Found(None)

        assert repo.append_message(db, 1, "hi") == Found(1)
        assert repo.get_messages(db, 1) == Found(["hi"])

    def test_get_messages_missing_room(self, db):
        assert ChatRoomRepository().get_messages(db, 5) == NotFound()

    def test_append_member_predicate(self, db):
        repo = ChatRoomRepository()
        repo.create_room(db, "general", "p")
        assert repo.append_member(db, 1, "general", "x", 4) == NotFound()
        assert repo.append_member(db, 1, "general", "p", 4) == Found(1)

    def test_text_that_looks_like_json_stays_a_string(self, db):
        repo = ChatRoomRepository()
        repo.create_room(db, "general", "p")
        repo.append_message(db, 1, '["not", "a", "list"]')
        assert repo.get_messages(db, 1) == Found(['["not", "a", "list"]'])

    @pytest.mark.parametrize(
        "call",
        [
            lambda repo, db: repo.create_room(db, "general", "p"),
            lambda repo, db: repo.append_member(db, 1, "general", "p", 4),
            lambda repo, db: repo.append_message(db, 1, "hi"),
            lambda repo, db: repo.get_messages(db, 1),
        ],
    )
    def test_errors_become_failed(self, call):
        session = BrokenSession()
        assert isinstance(call(ChatRoomRepository(), session), Failed)
        assert session.rolled_back


class TestConcurrentAppends:
    """Parallel appends to one room through separate pooled connections."""

    WORKERS = 8
    APPENDS = 100

    @pytest.fixture
    def factory(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path}/rooms.db")
        Base.metadata.create_all(bind=engine)
        factory = build_session_factory(engine)
        with factory() as db:
            ChatRoomRepository().create_room(db, "general", "p")
        yield factory
        engine.dispose()

    def _run(self, factory, call):
        def worker(i):
            with factory() as db:
                return call(ChatRoomRepository(), db, i)

        with ThreadPoolExecutor(max_workers=self.WORKERS) as pool:
            return list(pool.map(worker, range(self.APPENDS)))

    def test_no_message_lost(self, factory):
        outcomes = self._run(factory, lambda repo, db, i: repo.append_message(db, 1, f"msg-{i}"))
        assert outcomes == [Found(1)] * self.APPENDS

        with factory() as db:
            stored = ChatRoomRepository().get_messages(db, 1).value
        assert sorted(stored) == sorted(f"msg-{i}" for i in range(self.APPENDS))

    def test_no_member_lost(self, factory):
        outcomes = self._run(factory, lambda repo, db, i: repo.append_member(db, 1, "general", "p", i))
        assert outcomes == [Found(1)] * self.APPENDS

        with factory() as db:
            room = db.get(ChatRoom, 1)
            assert sorted(room.user_list) == list(range(self.APPENDS))


def session_for(dialect):
    return SimpleNamespace(get_bind=lambda: SimpleNamespace(dialect=dialect))


def compile_append(dialect) -> str:
    stmt = (
        update(ChatRoom)
        .where(ChatRoom.id == 1)
        .values(message=json_append(session_for(dialect), ChatRoom.message, "hi"))
    )
    return str(stmt.compile(dialect=dialect, compile_kwargs={"literal_binds": True}))


class TestJsonAppendSql:
    """The append expression chosen per dialect."""

    def test_mysql(self):
        sql = compile_append(mysql.dialect())
        assert "json_array_append(coalesce(chat_room.message, json_array()), '$', 'hi')" in sql
        assert "WHERE chat_room.id = 1" in sql

    def test_sqlite(self):
        sql = compile_append(sqlite.dialect())
        assert "json_insert(coalesce(chat_room.message, json_array()), '$[#]', 'hi')" in sql
