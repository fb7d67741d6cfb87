"""Unit tests for src/db/database.py"""

from typing import Generator

import pytest
from sqlalchemy import Engine, create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.db import database
from src.db.database import build_session_factory, get_db, init_db


@pytest.fixture
def default_engine(monkeypatch: pytest.MonkeyPatch) -> Generator[Engine, None, None]:
    """Point the process-wide engine to an in-memory database (instead of the configured URL)."""
    engine = create_engine(
        "sqlite:///:memory:", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(database, "SessionLocal", sessionmaker(bind=engine))
    database.init_default_db.cache_clear()
    try:
        yield engine
    finally:
        database.init_default_db.cache_clear()
        engine.dispose()


def test_init_db_creates_tables() -> None:
    session_factory = build_session_factory("sqlite:///:memory:")
    engine = session_factory.kw["bind"]
    init_db(engine)
    assert {"stored_games", "next_game"} <= set(inspect(engine).get_table_names())


def test_get_db_yields_session_and_closes() -> None:
    session_factory = build_session_factory("sqlite:///:memory:")
    sessions = get_db(session_factory)
    db = next(sessions)
    assert isinstance(db, Session)
    sessions.close()


def test_session_factory_built_once() -> None:
    assert database.engine is database.SessionLocal.kw["bind"]


def test_get_db_default_creates_tables(default_engine: Engine) -> None:
    """Without an explicit factory, sessions come from the shared engine, whose tables exist."""
    first = get_db()
    second = get_db()
    try:
        assert next(first).get_bind() is default_engine
        assert next(second).get_bind() is default_engine
        assert {"stored_games", "next_game"} <= set(inspect(default_engine).get_table_names())
    finally:
        first.close()
        second.close()
