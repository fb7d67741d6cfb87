"""Unit tests for src/checkers/pieces.py and src/checkers/square.py"""

import pytest

from src.checkers.pieces import Piece
from src.checkers.square import NO_POS, Pos
from src.core.shared_types import Player


@pytest.mark.parametrize(
    "character, piece",
    [
        ("b", Piece(Player.BLACK)),
        ("r", Piece(Player.RED)),
        ("B", Piece(Player.BLACK, king=True)),
        ("R", Piece(Player.RED, king=True)),
    ],
)
def test_piece_characters(character: str, piece: Piece) -> None:
    assert Piece.from_char(character) == piece
    assert piece.to_char() == character


def test_crowning_keeps_color() -> None:
    assert Piece(Player.RED).crowned() == Piece(Player.RED, king=True)


@pytest.mark.parametrize(
    "pos, expected",
    [(Pos(0, 0), True), (Pos(7, 7), True), (Pos(8, 0), False), (Pos(0, -1), False), (NO_POS, False)],
)
def test_within_bounds(pos: Pos, expected: bool) -> None:
    assert pos.is_within_bounds() == expected


def test_playable_squares() -> None:
    assert Pos(1, 0).is_playable()
    assert Pos(0, 1).is_playable()
    assert not Pos(0, 0).is_playable()
    assert not Pos(3, 3).is_playable()


def test_position_arithmetic() -> None:
    assert Pos(2, 3) + (1, -1) == Pos(3, 2)
    assert Pos(2, 3).midpoint(Pos(0, 5)) == Pos(1, 4)
