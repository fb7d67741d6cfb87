"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Pos:
    """Zero-based (x, y) coordinates. x: column within a row, y: row (row 0 is where the black pieces start)."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __add__(self, other: tuple[int, int]) -> Pos:
        dx, dy = other
        return Pos(self.x + dx, self.y + dy)

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])

    def is_playable(self) -> bool:
        """Only the dark squares are used. On this board those are the squares with an odd coordinate sum."""
        return (self.x + self.y) % 2 == 1

    def midpoint(self, other: Pos) -> Pos:
        return Pos((self.x + other.x) // 2, (self.y + other.y) // 2)


# "No capture" sentinel: valid coordinates are never negative.
NO_POS = Pos(-1, -1)
