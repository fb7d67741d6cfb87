"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.shared_types import Player

# The counter is a singleton: always stored in the row with this key
NEXT_GAME_KEY = 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBStoredGame(Base):
    __tablename__ = "stored_games"
    index: Mapped[str] = mapped_column(primary_key=True)
    creator: Mapped[str]
    red: Mapped[str]
    black: Mapped[str]
    board: Mapped[str]
    turn: Mapped[str]
    move_count: Mapped[int] = mapped_column(default=0)
    winner: Mapped[str] = mapped_column(default=Player.NO_PLAYER.value)
    continue_x: Mapped[int] = mapped_column(default=-1)
    continue_y: Mapped[int] = mapped_column(default=-1)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class DBNextGame(Base):
    __tablename__ = "next_game"
    id: Mapped[int] = mapped_column(primary_key=True, default=NEXT_GAME_KEY)
    id_value: Mapped[int]
