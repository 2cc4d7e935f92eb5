"""Move value object and the side effects a move may carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from xadreis.core.enums import PieceKind
from xadreis.core.types import Coord, square_name

_PROMO_CHARS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class MovePiece:
    """Relocate a second piece (the rook when castling)."""

    from_sq: Coord
    to_sq: Coord


@dataclass(frozen=True, slots=True)
class RemovePiece:
    """Clear a square no piece arrives on (the pawn taken en passant)."""

    at: Coord


@dataclass(frozen=True, slots=True)
class AddPiece:
    """Place a new piece owned by the mover (promotion)."""

    at: Coord
    kind: PieceKind


SideEffect: TypeAlias = MovePiece | RemovePiece | AddPiece


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Coord
    to_sq: Coord
    side_effect: SideEffect | None = None

    @property
    def promotion(self) -> PieceKind | None:
        if isinstance(self.side_effect, AddPiece):
            return self.side_effect.kind
        return None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        promotion = self.promotion
        if promotion is not None:
            base += _PROMO_CHARS.get(promotion, "")
        return base
