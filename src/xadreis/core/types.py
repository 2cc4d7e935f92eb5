"""Coordinate type alias and helpers.

Board layout (row-major, Black at the top):
    row 0 = rank 8 (a8 .. h8)
    ...
    row 7 = rank 1 (a1 .. h1)
Column 0 is the a-file.
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (row, col), both 0–7


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) lies on the board."""
    return 0 <= row <= 7 and 0 <= col <= 7


def square_name(coord: Coord) -> str:
    """Algebraic name, e.g. (7, 4) → 'e1'."""
    row, col = coord
    return chr(ord("a") + col) + str(8 - row)


def parse_square(name: str) -> Coord:
    """Parse an algebraic square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (8 - int(name[1]), ord(name[0]) - ord("a"))
