"""Attack maps and check detection.

Attacked squares answer "could the king stand here?", so they differ from
playable moves: pawns attack only their forward diagonals, and a ray stops
on the first occupied square whoever owns it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xadreis.core.enums import Owner, PieceKind
from xadreis.core.types import Coord, in_bounds

if TYPE_CHECKING:
    from collections.abc import Collection

    from xadreis.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


def pawn_direction(owner: Owner) -> int:
    """Row step of *owner*'s pawns: White moves toward row 0."""
    return -1 if owner == Owner.WHITE else 1


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Coord, tuple[Coord, ...]]:
    targets: dict[Coord, tuple[Coord, ...]] = {}
    for row in range(8):
        for col in range(8):
            targets[(row, col)] = tuple(
                (row + dr, col + dc)
                for dr, dc in offsets
                if in_bounds(row + dr, col + dc)
            )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Coord, tuple[tuple[Coord, ...], ...]]:
    rays_per_square: dict[Coord, tuple[tuple[Coord, ...], ...]] = {}
    for row in range(8):
        for col in range(8):
            square_rays: list[tuple[Coord, ...]] = []
            for dr, dc in directions:
                r, c = row + dr, col + dc
                ray: list[Coord] = []
                while in_bounds(r, c):
                    ray.append((r, c))
                    r += dr
                    c += dc
                if ray:
                    square_rays.append(tuple(ray))
            rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

SLIDER_RAYS: dict[PieceKind, dict[Coord, tuple[tuple[Coord, ...], ...]]] = {
    PieceKind.BISHOP: BISHOP_RAYS,
    PieceKind.ROOK: ROOK_RAYS,
    PieceKind.QUEEN: QUEEN_RAYS,
}


# -- Attack generator -------------------------------------------------------


def pawn_attacks(coord: Coord, owner: Owner) -> tuple[Coord, ...]:
    """The (up to two) diagonal squares a pawn on *coord* attacks."""
    row, col = coord
    ahead = row + pawn_direction(owner)
    return tuple((ahead, c) for c in (col - 1, col + 1) if in_bounds(ahead, c))


def attacks_from(position: Position, coord: Coord) -> list[Coord]:
    """Squares attacked by the piece standing on *coord* (empty list if none)."""
    square = position[coord]
    kind = square.kind
    if kind == PieceKind.PAWN:
        return list(pawn_attacks(coord, square.owner))
    if kind == PieceKind.KNIGHT:
        return list(KNIGHT_TARGETS[coord])
    if kind == PieceKind.KING:
        return list(KING_TARGETS[coord])
    if kind in SLIDER_RAYS:
        board = position.board
        found: list[Coord] = []
        for ray in SLIDER_RAYS[kind][coord]:
            for row, col in ray:
                found.append((row, col))
                if not board[row][col].is_empty:
                    break
        return found
    return []


def attacked_squares(position: Position, side: Owner) -> frozenset[Coord]:
    """Every square threatened by *side*'s pieces."""
    attacked: set[Coord] = set()
    for coord, _square in position.pieces(side):
        attacked.update(attacks_from(position, coord))
    return frozenset(attacked)


# -- Check detector ---------------------------------------------------------


def in_check(position: Position, side: Owner, attacks: Collection[Coord]) -> bool:
    """Whether *attacks* hits the square of *side*'s king.

    *attacks* is normally ``attacked_squares(position, side.opposite)``.
    A side without a king is never in check.
    """
    king_sq = position.king_square(side)
    if king_sq is None:
        return False
    return king_sq in attacks
