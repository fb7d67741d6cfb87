"""Protocol repository (can implement later for SQL Alchemy / simple key-value store etc.)"""

from typing import Protocol

from src.core.models import NextGame, StoredGame


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, index: str) -> StoredGame | None:
        """Get game by index, if record exists."""
        ...

    def set_game(self, game: StoredGame) -> StoredGame:
        """Store the game under its index (creates the record or overwrites it)."""
        ...

    def list_games(self) -> list[StoredGame]:
        """All stored games, ordered by index."""
        ...

    def get_next_game(self) -> NextGame | None:
        """The next-game counter, if it was initialized."""
        ...

    def set_next_game(self, next_game: NextGame) -> NextGame:
        """Store the next-game counter."""
        ...
