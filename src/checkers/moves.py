"""
Geometry/Base movement and capturing rules

Key idea: a piece only ever moves along diagonals, either one square (a step) or two squares over an opposing piece (a jump).
Men only go "forward" (towards the opponent's side), kings go in all four diagonal directions.

Whose turn it is and what happens after the move is decided in rules.py
"""

from dataclasses import dataclass
from typing import Protocol

from src.checkers.pieces import Piece
from src.checkers.square import Pos
from src.core.shared_types import Player, opponent


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, pos: Pos) -> Piece | None: ...
    def is_occupied(self, pos: Pos) -> bool: ...
    def locate_player(self, player: Player) -> list[Pos]: ...


Vector = tuple[int, int]

# Black starts on the rows with low y and moves down the board, red moves up.
FORWARD: dict[Player, int] = {
    Player.BLACK: 1,
    Player.RED: -1,
}

ALL_DIAGONALS: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    src: Pos
    dst: Pos

    @property
    def delta(self) -> Vector:
        return (self.dst.x - self.src.x, self.dst.y - self.src.y)

    def is_step(self) -> bool:
        dx, dy = self.delta
        return abs(dx) == 1 and abs(dy) == 1

    def is_jump(self) -> bool:
        dx, dy = self.delta
        return abs(dx) == 2 and abs(dy) == 2

    def direction(self) -> Vector:
        """Unit diagonal vector the move goes along. Only meaningful for steps and jumps."""
        dx, dy = self.delta
        return (_sign(dx), _sign(dy))

    def jumped_square(self) -> Pos:
        return self.src.midpoint(self.dst)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def movement_directions(piece: Piece) -> list[Vector]:
    """Directions the piece is allowed to move (and capture) in."""
    if piece.king:
        return ALL_DIAGONALS
    forward = FORWARD[piece.player]
    return [(1, forward), (-1, forward)]


def promotion_row(player: Player) -> int:
    """The farthest row from the player's perspective: reaching it crowns a man."""
    return 7 if FORWARD[player] > 0 else 0


def is_capturable(board: Board, pos: Pos, player: Player) -> bool:
    """Does the square hold a piece of the player's opponent?"""
    target = board.piece(pos)
    return target is not None and target.player == opponent(player)


# --- MOVEMENT RULES ---
def candidate_steps(pos: Pos, board: Board) -> list[Move]:
    """Single diagonal steps onto empty squares"""
    piece = board.piece(pos)
    if piece is None:
        return []

    moves: list[Move] = []
    for direction in movement_directions(piece):
        target = pos + direction
        if target.is_within_bounds() and not board.is_occupied(target):
            moves.append(Move(pos, target))
    return moves


def candidate_jumps(pos: Pos, board: Board) -> list[Move]:
    """Jumps over an opposing piece onto an empty square right behind it"""
    piece = board.piece(pos)
    if piece is None:
        return []

    moves: list[Move] = []
    for dx, dy in movement_directions(piece):
        target = pos + (2 * dx, 2 * dy)
        if not target.is_within_bounds() or board.is_occupied(target):
            continue
        if is_capturable(board, pos + (dx, dy), piece.player):
            moves.append(Move(pos, target))
    return moves


def candidate_moves(player: Player, board: Board) -> list[Move]:
    """All steps and jumps for every piece of the player"""
    moves: list[Move] = []
    for pos in board.locate_player(player):
        moves.extend(candidate_steps(pos, board))
        moves.extend(candidate_jumps(pos, board))
    return moves


def has_any_jump(player: Player, board: Board) -> bool:
    return any(candidate_jumps(pos, board) for pos in board.locate_player(player))
