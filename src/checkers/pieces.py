"""Defines the checkers pieces"""

from dataclasses import dataclass, replace
from typing import Self

from src.core.shared_types import Player

CHAR_TO_PLAYER: dict[str, Player] = {
    "r": Player.RED,
    "b": Player.BLACK,
}

PLAYER_TO_CHAR: dict[Player, str] = {value: key for key, value in CHAR_TO_PLAYER.items()}

EMPTY_SQUARE = "*"


@dataclass(frozen=True)
class Piece:
    player: Player
    king: bool = False

    @classmethod
    def from_char(cls, character: str) -> Self:
        # lower case: men, upper case: kings. The letter itself gives the color.
        player = CHAR_TO_PLAYER[character.lower()]
        return cls(player, king=character.isupper())

    def to_char(self) -> str:
        character = PLAYER_TO_CHAR[self.player]
        return character.upper() if self.king else character

    def crowned(self) -> Self:
        return replace(self, king=True)
