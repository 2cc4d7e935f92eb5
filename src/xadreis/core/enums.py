"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class PieceKind(IntEnum):
    """What occupies a square. ``NONE`` marks an empty square."""

    NONE = 0
    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class Owner(IntEnum):
    """Side owning a square's piece. ``NONE`` marks an empty square."""

    NONE = 0
    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> Owner:
        if self == Owner.WHITE:
            return Owner.BLACK
        if self == Owner.BLACK:
            return Owner.WHITE
        return Owner.NONE

    def __str__(self) -> str:
        return self.name.lower()


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH
