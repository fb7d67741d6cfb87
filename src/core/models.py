"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

from src.checkers.notation import is_valid_board_string, is_valid_turn_string
from src.core.exceptions import ValidationError
from src.core.identity import AddressRule, is_valid_address
from src.core.shared_types import Player


@dataclass
class StoredGame:
    """Transport-safe representation of a checkers game, as it is kept in storage."""

    index: str
    creator: str
    red: str
    black: str
    board: str
    turn: str
    move_count: int = 0
    winner: str = Player.NO_PLAYER.value
    # piece in the middle of a multi-jump, (-1, -1) when there is none
    continue_x: int = -1
    continue_y: int = -1

    def validate(self, address_rule: AddressRule = is_valid_address) -> None:
        """Check the record can safely be stored: both participants are proper addresses and the board decodes."""
        if not address_rule(self.red):
            raise ValidationError(f"red address is invalid: {self.red!r}")
        if not address_rule(self.black):
            raise ValidationError(f"black address is invalid: {self.black!r}")
        if not is_valid_board_string(self.board):
            raise ValidationError(f"game cannot be parsed: {self.board!r}")
        if not is_valid_turn_string(self.turn):
            raise ValidationError(f"turn cannot be parsed: {self.turn!r}")


@dataclass
class NextGame:
    """Singleton counter: the index the next created game will get."""

    id_value: int = 1
