"""
The rules engine: single source of truth for what a legal checkers move is on one board.

apply_move is a pure function of (board, side to move, move, configuration). Who is allowed to ask for a move
(participant identities) is not known here: that is checked by the Game.
"""

from dataclasses import dataclass, field
from typing import Callable

from src.checkers.board import Board
from src.checkers.moves import (
    Move,
    candidate_jumps,
    candidate_moves,
    has_any_jump,
    is_capturable,
    movement_directions,
    promotion_row,
)
from src.checkers.square import NO_POS, Pos
from src.core.exceptions import (
    CaptureRequiredError,
    IllegalGeometryError,
    JumpContinuationError,
    MissingCaptureTargetError,
    NoPieceAtSourceError,
    OccupiedDestinationError,
    OutOfBoundsError,
    OutOfTurnError,
)
from src.core.shared_types import Player, WinCondition, opponent

# Receives the board after the move and the side that would move next. True means that side has lost.
WinConditionFn = Callable[[Board, Player], bool]


# --- WIN CONDITIONS ---
def no_pieces_remaining(board: Board, player: Player) -> bool:
    return board.count_pieces(player) == 0


def no_legal_moves(board: Board, player: Player) -> bool:
    """Also covers the case of no pieces at all: nothing to move."""
    return len(candidate_moves(player, board)) == 0


WIN_CONDITIONS: dict[WinCondition, WinConditionFn] = {
    WinCondition.NO_PIECES: no_pieces_remaining,
    WinCondition.NO_MOVES: no_legal_moves,
}


@dataclass(frozen=True)
class RulesConfig:
    """
    Policy choices that differ between rule sets.
    ----

    * continue_multi_jump: after a capture, the same side keeps the turn if the piece that just captured can capture again
        (unless it just got crowned). Off by default: the turn always passes after one accepted move.
    * forced_capture: when any capture is available, plain steps are refused.
    * win_condition: predicate deciding if the side that moves next has lost.
    """

    continue_multi_jump: bool = False
    forced_capture: bool = False
    win_condition: WinConditionFn = field(default=no_pieces_remaining)


DEFAULT_RULES = RulesConfig()


@dataclass(frozen=True)
class MoveOutcome:
    board: Board
    turn: Player
    captured: Pos
    winner: Player
    # square of the piece that must keep jumping, NO_POS when the turn is not held for a multi-jump
    continue_from: Pos = NO_POS


def apply_move(
    board: Board,
    turn: Player,
    src: Pos,
    dst: Pos,
    config: RulesConfig = DEFAULT_RULES,
    continue_from: Pos = NO_POS,
) -> MoveOutcome:
    """
    Attempt a move for the side to move
    -----

    1. the coordinates must be on the board
    2. there must be a piece of the side to move on src, and nothing on dst
    3. the move must be a diagonal step or a jump over an opposing piece, in a direction the piece may go
       (during a multi-jump, only a jump by the piece standing on continue_from)
    4. move the piece (removing the captured piece if any), crown it when it reaches the far row
    5. decide on the winner and whose turn it is next

    The board that gets passed in is left untouched.
    """
    _assert_within_bounds(src, dst)

    piece = board.piece(src)
    if piece is None:
        raise NoPieceAtSourceError(f"No piece at source position: {src}")
    if board.is_occupied(dst):
        raise OccupiedDestinationError(f"Already piece at destination position: {dst}")
    if piece.player != turn:
        raise OutOfTurnError(f"Not {piece.player}'s turn")

    move = Move(src, dst)
    _assert_valid_geometry(move, movement_directions(piece))
    _assert_continues_jump(move, continue_from)

    new_board = board.copy()
    captured = NO_POS
    if move.is_jump():
        captured = move.jumped_square()
        if not is_capturable(board, captured, piece.player):
            raise MissingCaptureTargetError(
                f"Invalid move: {src} to {dst}, no opposing piece at {captured} to capture"
            )
        new_board.remove_piece(captured)
    elif config.forced_capture and has_any_jump(turn, board):
        raise CaptureRequiredError(f"Invalid move: {src} to {dst}, a capture is available")

    new_board.move_piece(src, dst)

    crowned = not piece.king and dst.y == promotion_row(piece.player)
    if crowned:
        new_board.place_piece(piece.crowned(), dst)

    # the game is over: nobody holds the turn anymore
    next_player = opponent(turn)
    if config.win_condition(new_board, next_player):
        return MoveOutcome(new_board, Player.NO_PLAYER, captured, turn)

    keeps_turn = (
        config.continue_multi_jump
        and captured != NO_POS
        and not crowned
        and bool(candidate_jumps(dst, new_board))
    )
    return MoveOutcome(
        board=new_board,
        turn=turn if keeps_turn else next_player,
        captured=captured,
        winner=Player.NO_PLAYER,
        continue_from=dst if keeps_turn else NO_POS,
    )


def legal_moves(
    board: Board,
    player: Player,
    config: RulesConfig = DEFAULT_RULES,
    continue_from: Pos = NO_POS,
) -> list[Move]:
    """Moves apply_move would accept for the player (on its turn)"""
    if continue_from != NO_POS:
        return candidate_jumps(continue_from, board)
    moves = candidate_moves(player, board)
    if config.forced_capture and any(move.is_jump() for move in moves):
        return [move for move in moves if move.is_jump()]
    return moves


def _assert_within_bounds(*positions: Pos) -> None:
    for pos in positions:
        if not pos.is_within_bounds():
            raise OutOfBoundsError(f"Position out of bounds: {pos}")


def _assert_valid_geometry(move: Move, allowed_directions: list[tuple[int, int]]) -> None:
    if not move.dst.is_playable():
        raise IllegalGeometryError(f"Invalid move: {move.src} to {move.dst}, not a playable square")
    if not (move.is_step() or move.is_jump()):
        raise IllegalGeometryError(f"Invalid move: {move.src} to {move.dst}")
    if move.direction() not in allowed_directions:
        raise IllegalGeometryError(
            f"Invalid move: {move.src} to {move.dst}, piece cannot move in that direction"
        )


def _assert_continues_jump(move: Move, continue_from: Pos) -> None:
    if continue_from == NO_POS:
        return
    if move.src != continue_from or not move.is_jump():
        raise JumpContinuationError(
            f"Invalid move: {move.src} to {move.dst}, the piece on {continue_from} must keep jumping"
        )
