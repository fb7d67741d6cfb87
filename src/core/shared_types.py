"""
Type definitions used across layers
"""

from enum import StrEnum


class Player(StrEnum):
    """
    Side-to-move / owner of a piece.

    NO_PLAYER is the sentinel used as the winner of a game still in progress (and as the turn of a finished game).
    The values are the ones sent out in events and responses.
    """

    RED = "red"
    BLACK = "black"
    NO_PLAYER = "NO_PLAYER"


class WinCondition(StrEnum):
    """Names of the available win detection policies (see src/checkers/rules.py)"""

    NO_PIECES = "no_pieces"
    NO_MOVES = "no_moves"


def opponent(player: Player) -> Player:
    if player == Player.RED:
        return Player.BLACK
    if player == Player.BLACK:
        return Player.RED
    return Player.NO_PLAYER
