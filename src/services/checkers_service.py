"""Orchestration of communication from the message layer to business logic and persistence layers (and the reverse direction)."""

import logging

from src.api.models import (
    CreateGameRequest,
    CreateGameResponse,
    GetGameRequest,
    NextGameResponse,
    PlayMoveRequest,
    PlayMoveResponse,
    StoredGameResponse,
)
from src.checkers.game import Game
from src.checkers.rules import DEFAULT_RULES, RulesConfig
from src.checkers.square import Pos
from src.core.events import (
    PLAY_MOVE_EVENT_CAPTURED_X,
    PLAY_MOVE_EVENT_CAPTURED_Y,
    PLAY_MOVE_EVENT_CREATOR,
    PLAY_MOVE_EVENT_ID_VALUE,
    PLAY_MOVE_EVENT_KEY,
    PLAY_MOVE_EVENT_WINNER,
    STORED_GAME_EVENT_BLACK,
    STORED_GAME_EVENT_CREATOR,
    STORED_GAME_EVENT_INDEX,
    STORED_GAME_EVENT_KEY,
    STORED_GAME_EVENT_RED,
    EventSink,
    message_event,
)
from src.core.exceptions import GameError, GameNotFoundError, InvariantError, ValidationError
from src.core.identity import AddressRule, is_valid_address
from src.core.models import NextGame, StoredGame
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for checkers games."""

    def __init__(
        self,
        repository: GameRepository,
        events: EventSink,
        rules: RulesConfig = DEFAULT_RULES,
        address_rule: AddressRule = is_valid_address,
    ) -> None:
        self.repo = repository
        self.events = events
        self.rules = rules
        self.address_rule = address_rule

    # -- Message handlers ---
    def create_game(self, request: CreateGameRequest) -> CreateGameResponse:
        """
        Create a new game with the next free index.

        The index is only consumed if the game gets stored: a game that fails validation leaves the counter as it was.
        """
        next_game = self._fetch_next_game()
        new_index = str(next_game.id_value)

        # Create a new game and check it is ok (creator, red and black must all pass the address rule)
        new_game = Game.new_game(
            index=new_index,
            creator=request.creator,
            red=request.red,
            black=request.black,
        )
        stored_game = new_game.to_model()
        try:
            if not self.address_rule(request.creator):
                raise ValidationError(f"creator address is invalid: {request.creator!r}")
            stored_game.validate(self.address_rule)
        except GameError as exc:
            logger.warning("Rejected new game from %s: %s", request.creator, exc)
            raise

        # Now set the new values of the two objects
        self.repo.set_game(stored_game)
        self.repo.set_next_game(NextGame(id_value=next_game.id_value + 1))

        self.events.emit(
            message_event(
                STORED_GAME_EVENT_KEY,
                (STORED_GAME_EVENT_CREATOR, request.creator),
                (STORED_GAME_EVENT_INDEX, new_index),
                (STORED_GAME_EVENT_RED, request.red),
                (STORED_GAME_EVENT_BLACK, request.black),
            )
        )
        logger.info("Game %s created by %s", new_index, request.creator)
        return CreateGameResponse(id_value=new_index)

    def play_move(self, request: PlayMoveRequest) -> PlayMoveResponse:
        """Make a move attempt. The creator is authorized by matching it against the game's red and black participants."""

        # Retrieve persisted game from repository
        stored_game = self._fetch_game(request.id_value)

        # Create a new Game instance from the retrieved model
        game = Game.from_model(stored_game)

        # Attempt the move (nothing gets stored if this raises)
        try:
            outcome = game.play_move(
                request.creator,
                Pos(request.from_x, request.from_y),
                Pos(request.to_x, request.to_y),
                self.rules,
            )
        except GameError as exc:
            logger.info("Rejected move in game %s by %s: %s", request.id_value, request.creator, exc)
            raise

        # Store the updated state
        self.repo.set_game(game.to_model())

        captured_x, captured_y = str(outcome.captured.x), str(outcome.captured.y)
        self.events.emit(
            message_event(
                PLAY_MOVE_EVENT_KEY,
                (PLAY_MOVE_EVENT_CREATOR, request.creator),
                (PLAY_MOVE_EVENT_ID_VALUE, request.id_value),
                (PLAY_MOVE_EVENT_CAPTURED_X, captured_x),
                (PLAY_MOVE_EVENT_CAPTURED_Y, captured_y),
                (PLAY_MOVE_EVENT_WINNER, outcome.winner.value),
            )
        )
        logger.info(
            "Game %s: move %d played by %s, captured %s, winner %s",
            request.id_value,
            game.move_count,
            request.creator,
            outcome.captured,
            outcome.winner,
        )
        return PlayMoveResponse(
            id_value=request.id_value,
            captured_x=outcome.captured.x,
            captured_y=outcome.captured.y,
            winner=outcome.winner,
        )

    # -- Queries --
    def get_stored_game(self, request: GetGameRequest) -> StoredGameResponse:
        return self._create_stored_game_response(self._fetch_game(request.index))

    def list_stored_games(self) -> list[StoredGameResponse]:
        return [self._create_stored_game_response(game) for game in self.repo.list_games()]

    def get_next_game(self) -> NextGameResponse:
        return NextGameResponse(id_value=self._fetch_next_game().id_value)

    # -- Internal helpers --
    def _create_stored_game_response(self, model: StoredGame) -> StoredGameResponse:
        return StoredGameResponse(
            index=model.index,
            creator=model.creator,
            red=model.red,
            black=model.black,
            game=model.board,
            turn=model.turn,
            move_count=model.move_count,
            winner=model.winner,
        )

    def _fetch_game(self, index: str) -> StoredGame:
        """Attempt to find the game in the repository and raise error if it fails."""
        stored_game = self.repo.get_game(index)
        if stored_game is None:
            raise GameNotFoundError(f"game not found: {index}")
        return stored_game

    def _fetch_next_game(self) -> NextGame:
        next_game = self.repo.get_next_game()
        if next_game is None:
            raise InvariantError("NextGame not found")
        return next_game
