"""The Board holds the configuration of the pieces and knows how to encode/decode itself (see src/checkers/notation.py)"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.notation import ROW_SEPARATOR, is_valid_board_string
from src.checkers.pieces import EMPTY_SQUARE, Piece
from src.checkers.square import BOARD_DIMENSIONS, Pos
from src.core.exceptions import MalformedBoardError
from src.core.shared_types import Player

STARTING_BOARD = "*b*b*b*b|b*b*b*b*|*b*b*b*b|********|********|r*r*r*r*|*r*r*r*r|r*r*r*r*"


@dataclass
class Board:
    # Only occupied squares are present
    pieces: dict[Pos, Piece] = field(default_factory=dict)

    @classmethod
    def from_string(cls, board_str: str) -> Self:
        """Decode a persisted board string. Raises MalformedBoardError if the string has the wrong shape or characters."""
        if not is_valid_board_string(board_str):
            raise MalformedBoardError(f"Cannot interpret supplied string as a board: {board_str!r}")

        pieces: dict[Pos, Piece] = {}
        for y, row in enumerate(board_str.split(ROW_SEPARATOR)):
            for x, character in enumerate(row):
                if character != EMPTY_SQUARE:
                    pieces[Pos(x, y)] = Piece.from_char(character)
        return cls(pieces)

    def to_string(self) -> str:
        """Rows are separated by a '|'. First row is y = 0."""
        return ROW_SEPARATOR.join(self._row_to_string(y) for y in range(BOARD_DIMENSIONS[1]))

    def _row_to_string(self, y: int) -> str:
        characters: list[str] = []
        for x in range(BOARD_DIMENSIONS[0]):
            piece = self.piece(Pos(x, y))
            characters.append(piece.to_char() if piece else EMPTY_SQUARE)
        return "".join(characters)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_string(STARTING_BOARD)

    def copy(self) -> Self:
        return deepcopy(self)

    def piece(self, pos: Pos) -> Optional[Piece]:
        return self.pieces.get(pos)

    def is_occupied(self, pos: Pos) -> bool:
        return pos in self.pieces

    def locate_player(self, player: Player) -> list[Pos]:
        return [pos for pos, piece in self.pieces.items() if piece.player == player]

    def count_pieces(self, player: Player) -> int:
        return len(self.locate_player(player))

    def place_piece(self, piece: Piece, pos: Pos) -> None:
        self.pieces[pos] = piece

    def remove_piece(self, pos: Pos) -> Piece:
        return self.pieces.pop(pos)

    def move_piece(self, src: Pos, dst: Pos) -> None:
        """Update the position on the board. No rules are checked here."""
        self.pieces[dst] = self.pieces.pop(src)
