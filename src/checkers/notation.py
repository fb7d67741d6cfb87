"""
Textual encodings that get persisted: the board string and the turn marker.

Board string: 8 rows separated by "|", first row is y = 0. Within a row, one character per column:
* "*" for an empty square
* "b" / "r" for a black / red man
* "B" / "R" for a black / red king

ex) the starting position:
*b*b*b*b|b*b*b*b*|*b*b*b*b|********|********|r*r*r*r*|*r*r*r*r|r*r*r*r*
"""

from src.checkers.pieces import CHAR_TO_PLAYER, EMPTY_SQUARE, PLAYER_TO_CHAR
from src.checkers.square import BOARD_DIMENSIONS
from src.core.exceptions import MalformedBoardError
from src.core.shared_types import Player

ROW_SEPARATOR = "|"
NO_PLAYER_TURN = "*"

VALID_SQUARE_CHARACTERS: frozenset[str] = frozenset(
    [EMPTY_SQUARE]
    + list(CHAR_TO_PLAYER.keys())
    + [character.upper() for character in CHAR_TO_PLAYER.keys()]
)

TURN_TO_STRING: dict[Player, str] = {
    **PLAYER_TO_CHAR,
    Player.NO_PLAYER: NO_PLAYER_TURN,
}
STRING_TO_TURN: dict[str, Player] = {value: key for key, value in TURN_TO_STRING.items()}


def is_valid_board_string(board: str) -> bool:
    """Only checks the shape and the character set. Which squares are playable is up to the rules."""
    num_columns, num_rows = BOARD_DIMENSIONS
    rows = board.split(ROW_SEPARATOR)
    if len(rows) != num_rows:
        return False
    return all(is_valid_row(row, num_columns) for row in rows)


def is_valid_row(row: str, num_columns: int = BOARD_DIMENSIONS[0]) -> bool:
    return len(row) == num_columns and all(
        character in VALID_SQUARE_CHARACTERS for character in row
    )


def is_valid_turn_string(turn: str) -> bool:
    return turn in STRING_TO_TURN


def turn_to_string(player: Player) -> str:
    return TURN_TO_STRING[player]


def string_to_turn(turn: str) -> Player:
    if not is_valid_turn_string(turn):
        raise MalformedBoardError(f"Cannot interpret {turn!r} as a turn.")
    return STRING_TO_TURN[turn]
