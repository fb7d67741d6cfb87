"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of checkers -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

from dataclasses import dataclass
from typing import Self

from src.checkers.board import Board
from src.checkers.notation import string_to_turn, turn_to_string
from src.checkers.rules import DEFAULT_RULES, MoveOutcome, RulesConfig, apply_move
from src.checkers.square import NO_POS, Pos
from src.core.exceptions import GameFinishedError, MalformedBoardError, OutOfTurnError
from src.core.models import StoredGame
from src.core.shared_types import Player

# Black always opens the game
FIRST_PLAYER = Player.BLACK


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    index: str
    creator: str
    red: str
    black: str
    board: Board
    turn: Player
    move_count: int
    winner: Player
    continue_from: Pos = NO_POS

    @classmethod
    def from_model(cls, model: StoredGame) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        winner = model.winner
        if winner not in Player.__members__.values():
            raise MalformedBoardError(f"Invalid winner: {winner!r}")
        continue_from = Pos(model.continue_x, model.continue_y)
        if continue_from != NO_POS and not continue_from.is_within_bounds():
            raise MalformedBoardError(f"Invalid multi-jump square: {continue_from}")

        return cls(
            index=model.index,
            creator=model.creator,
            red=model.red,
            black=model.black,
            board=Board.from_string(model.board),
            turn=string_to_turn(model.turn),
            move_count=model.move_count,
            winner=Player(winner),
            continue_from=continue_from,
        )

    def to_model(self) -> StoredGame:
        """Encode back into a format the Service layer uses"""
        return StoredGame(
            index=self.index,
            creator=self.creator,
            red=self.red,
            black=self.black,
            board=self.board.to_string(),
            turn=turn_to_string(self.turn),
            move_count=self.move_count,
            winner=self.winner.value,
            continue_x=self.continue_from.x,
            continue_y=self.continue_from.y,
        )

    @classmethod
    def new_game(cls, index: str, creator: str, red: str, black: str) -> Self:
        """Standard starting position, nobody has won and no moves were played yet."""
        return cls(
            index=index,
            creator=creator,
            red=red,
            black=black,
            board=Board.starting_position(),
            turn=FIRST_PLAYER,
            move_count=0,
            winner=Player.NO_PLAYER,
        )

    @property
    def is_finished(self) -> bool:
        return self.winner != Player.NO_PLAYER

    def play_move(
        self, player: str, src: Pos, dst: Pos, rules: RulesConfig = DEFAULT_RULES
    ) -> MoveOutcome:
        """
        Attempt a move on behalf of a participant
        -----

        1. the game must still be going on
        2. the participant must control the side whose turn it is
        3. the rules engine validates and resolves the move
        4. update board, turn, winner, pending multi-jump and the move counter

        On any exception the game is left as it was.
        """
        if self.is_finished:
            raise GameFinishedError(f"Game {self.index} is already won by {self.winner}")

        self._assert_your_turn(player)

        outcome = apply_move(self.board, self.turn, src, dst, rules, self.continue_from)

        self.board = outcome.board
        self.turn = outcome.turn
        self.winner = outcome.winner
        self.continue_from = outcome.continue_from
        self.move_count += 1
        return outcome

    # -- PRIVATE HELPERS ---
    def _player_color(self, player: str) -> Player:
        """
        Color the participant is allowed to move as.

        When the same participant plays both sides, it always controls the side whose turn it is.
        """
        if self.red == self.black and player == self.red:
            return self.turn
        if player == self.red:
            return Player.RED
        if player == self.black:
            return Player.BLACK
        return Player.NO_PLAYER

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before making a move."""
        if self._player_color(player) != self.turn:
            raise OutOfTurnError(f"player tried to play out of turn: {player}")
