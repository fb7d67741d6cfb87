"""Generate database session"""

from functools import cache
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


def build_session_factory(database_url: str, echo: bool = False) -> sessionmaker[Session]:
    engine = create_engine(database_url, echo=echo)
    return sessionmaker(bind=engine)


# Built once per process. create_engine does not connect until the first session is used.
SessionLocal = build_session_factory(Settings.from_env().database_url)
engine = SessionLocal.kw["bind"]


def init_db(engine: Engine) -> None:
    """Ensure all tables are created"""
    Base.metadata.create_all(bind=engine)


@cache
def init_default_db() -> None:
    """Create the tables of the process-wide database, on first use only."""
    init_db(engine)


def get_db(session_factory: Optional[sessionmaker[Session]] = None) -> Generator[Session, None, None]:
    if session_factory is None:
        init_default_db()
        session_factory = SessionLocal
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
