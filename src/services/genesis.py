"""
Genesis: the state the store starts from (and can be dumped back into).

The next-game counter must exist before the first game can be created, so init_genesis has to run once on a fresh store.
"""

import logging
from dataclasses import dataclass, field

from src.core.exceptions import InvariantError, ValidationError
from src.core.models import NextGame, StoredGame
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


@dataclass
class GenesisState:
    next_game: NextGame = field(default_factory=NextGame)
    stored_games: list[StoredGame] = field(default_factory=list)

    def validate(self) -> None:
        """No duplicate indexes, and every index must have been handed out before the counter's current value."""
        seen: set[str] = set()
        for game in self.stored_games:
            if game.index in seen:
                raise ValidationError(f"duplicated index for storedGame: {game.index}")
            seen.add(game.index)

            if not game.index.isdigit() or int(game.index) >= self.next_game.id_value:
                raise ValidationError(
                    f"storedGame index {game.index!r} is not below the next game id {self.next_game.id_value}"
                )
            game.validate()


def default_genesis() -> GenesisState:
    return GenesisState(next_game=NextGame(id_value=1), stored_games=[])


def init_genesis(repository: GameRepository, state: GenesisState) -> None:
    state.validate()
    for game in state.stored_games:
        repository.set_game(game)
    repository.set_next_game(state.next_game)
    logger.info(
        "Genesis initialized: %d stored game(s), next game id %d",
        len(state.stored_games),
        state.next_game.id_value,
    )


def export_genesis(repository: GameRepository) -> GenesisState:
    """Dump the store. A store without a next-game counter was never initialized and cannot be exported."""
    next_game = repository.get_next_game()
    if next_game is None:
        raise InvariantError("NextGame not found")
    return GenesisState(
        next_game=next_game,
        stored_games=repository.list_games(),
    )
