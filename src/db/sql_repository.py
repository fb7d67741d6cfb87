"""Implementation of (Game)Repository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import NextGame, StoredGame
from src.db.schema import NEXT_GAME_KEY, DBNextGame, DBStoredGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, index: str) -> StoredGame | None:
        """Get game by index, if record exists."""
        game_db = self._fetch_game(index)
        if game_db:
            return self._to_model(game_db)
        return None

    def set_game(self, game: StoredGame) -> StoredGame:
        """Store the game under its index (creates the record or overwrites it)."""
        game_db = self._fetch_game(game.index)
        if game_db is None:
            game_db = DBStoredGame(index=game.index)
            self.db.add(game_db)
        game_db.creator = game.creator
        game_db.red = game.red
        game_db.black = game.black
        game_db.board = game.board
        game_db.turn = game.turn
        game_db.move_count = game.move_count
        game_db.winner = game.winner
        game_db.continue_x = game.continue_x
        game_db.continue_y = game.continue_y
        self.db.commit()
        self.db.refresh(game_db)
        logger.debug("Stored game %s (move count %d)", game.index, game.move_count)
        return self._to_model(game_db)

    def list_games(self) -> list[StoredGame]:
        """All stored games, ordered by (numeric) index."""
        games = [self._to_model(game_db) for game_db in self.db.scalars(select(DBStoredGame))]
        return sorted(games, key=lambda game: (len(game.index), game.index))

    def get_next_game(self) -> NextGame | None:
        next_game_db = self.db.get(DBNextGame, NEXT_GAME_KEY)
        if next_game_db is None:
            return None
        return NextGame(id_value=next_game_db.id_value)

    def set_next_game(self, next_game: NextGame) -> NextGame:
        next_game_db = self.db.get(DBNextGame, NEXT_GAME_KEY)
        if next_game_db is None:
            next_game_db = DBNextGame(id=NEXT_GAME_KEY, id_value=next_game.id_value)
            self.db.add(next_game_db)
        else:
            next_game_db.id_value = next_game.id_value
        self.db.commit()
        logger.debug("Stored next game counter: %d", next_game.id_value)
        return NextGame(id_value=next_game_db.id_value)

    def _fetch_game(self, index: str) -> DBStoredGame | None:
        query = select(DBStoredGame).where(DBStoredGame.index == index)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBStoredGame) -> StoredGame:
        """Convert SQLAlchemy model to data transfer model."""
        return StoredGame(
            index=game_db.index,
            creator=game_db.creator,
            red=game_db.red,
            black=game_db.black,
            board=game_db.board,
            turn=game_db.turn,
            move_count=game_db.move_count,
            winner=game_db.winner,
            continue_x=game_db.continue_x,
            continue_y=game_db.continue_y,
        )
