"""Move executor: apply a move to a position, producing the successor."""

from __future__ import annotations

from xadreis.core.enums import CastlingRights, Owner, PieceKind
from xadreis.core.move import AddPiece, Move, MovePiece, RemovePiece
from xadreis.core.position import Position
from xadreis.core.square import EMPTY, Square
from xadreis.core.types import Coord

_ROOK_CORNERS: dict[Coord, CastlingRights] = {
    (7, 0): CastlingRights.WHITE_QUEENSIDE,
    (7, 7): CastlingRights.WHITE_KINGSIDE,
    (0, 0): CastlingRights.BLACK_QUEENSIDE,
    (0, 7): CastlingRights.BLACK_KINGSIDE,
}

_KING_RIGHTS: dict[Owner, CastlingRights] = {
    Owner.WHITE: CastlingRights.WHITE_BOTH,
    Owner.BLACK: CastlingRights.BLACK_BOTH,
}


def apply_move(position: Position, move: Move) -> Position:
    """Return the position reached by playing *move*; *position* is untouched.

    No legality checking happens here. The same routine serves real turns
    and the speculative replays of the legal-move filter.
    """
    successor = position.copy()
    make_move(successor, move)
    return successor


def make_move(position: Position, move: Move) -> None:
    """Apply *move* to *position* in place."""
    piece = position[move.from_sq]
    mover = piece.owner
    captured = position[move.to_sq]

    # Lift piece from origin and drop it on the destination
    position[move.to_sq] = piece
    position[move.from_sq] = EMPTY

    effect = move.side_effect
    if isinstance(effect, MovePiece):
        position[effect.to_sq] = position[effect.from_sq]
        position[effect.from_sq] = EMPTY
    elif isinstance(effect, RemovePiece):
        captured = position[effect.at]
        position[effect.at] = EMPTY
    elif isinstance(effect, AddPiece):
        position[effect.at] = Square(effect.kind, mover)

    # En passant target for the opponent: the pawn that just stepped twice
    next_en_passant: Coord | None = None
    if piece.kind == PieceKind.PAWN and abs(move.to_sq[0] - move.from_sq[0]) == 2:
        next_en_passant = move.to_sq
    position.en_passant = next_en_passant

    # Castling rights
    castling = position.castling
    if piece.kind == PieceKind.KING:
        castling &= ~_KING_RIGHTS.get(mover, CastlingRights.NONE)
    for sq in (move.from_sq, move.to_sq):
        if sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[sq]
    position.castling = castling

    # Clocks
    if piece.kind == PieceKind.PAWN or not captured.is_empty:
        position.halfmove_clock = 0
    else:
        position.halfmove_clock += 1

    if mover == Owner.BLACK:
        position.fullmove_number += 1

    position.side_to_move = position.side_to_move.opposite
