"""Pseudo-legal move generation and the legal-move filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from xadreis.core.attacks import (
    KING_TARGETS,
    KNIGHT_TARGETS,
    SLIDER_RAYS,
    attacked_squares,
    in_check,
    pawn_direction,
)
from xadreis.core.enums import CastlingRights, Owner, PieceKind
from xadreis.core.executor import apply_move
from xadreis.core.move import AddPiece, Move, MovePiece, RemovePiece
from xadreis.core.square import Square
from xadreis.core.types import Coord, in_bounds

if TYPE_CHECKING:
    from collections.abc import Collection

    from xadreis.core.position import Position


PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)

# owner -> (king home, kingside right, queenside right)
_CASTLING_HOMES: dict[Owner, tuple[Coord, CastlingRights, CastlingRights]] = {
    Owner.WHITE: (
        (7, 4),
        CastlingRights.WHITE_KINGSIDE,
        CastlingRights.WHITE_QUEENSIDE,
    ),
    Owner.BLACK: (
        (0, 4),
        CastlingRights.BLACK_KINGSIDE,
        CastlingRights.BLACK_QUEENSIDE,
    ),
}


class MoveGenerator:
    """Generates moves for the side to move of a given :class:`Position`.

    Legality is decided by replaying each candidate on a copy of the
    position; the wrapped position itself is never modified.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        mover = self._pos.side_to_move
        opponent = mover.opposite
        legal: list[Move] = []
        append_legal = legal.append

        opponent_attacks = attacked_squares(self._pos, opponent)
        for move in self.generate_pseudo_legal_moves(opponent_attacks):
            after = apply_move(self._pos, move)
            if not in_check(after, mover, attacked_squares(after, opponent)):
                append_legal(move)
        return legal

    def generate_pseudo_legal_moves(
        self, opponent_attacks: Collection[Coord] | None = None
    ) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check).

        *opponent_attacks* gates castling; it is computed when omitted.
        """
        color = self._pos.side_to_move
        if opponent_attacks is None:
            opponent_attacks = attacked_squares(self._pos, color.opposite)

        moves: list[Move] = []
        for coord, square in self._pos.pieces(color):
            kind = square.kind
            if kind == PieceKind.PAWN:
                self._gen_pawn(coord, color, moves)
            elif kind == PieceKind.KNIGHT:
                self._gen_stepper(coord, color, KNIGHT_TARGETS[coord], moves)
            elif kind == PieceKind.KING:
                self._gen_stepper(coord, color, KING_TARGETS[coord], moves)
                self._gen_castling(coord, color, opponent_attacks, moves)
            else:
                self._gen_sliding(coord, color, SLIDER_RAYS[kind][coord], moves)
        return moves

    # -- Check helpers (public) ---------------------------------------------

    def is_in_check(self, color: Owner | None = None) -> bool:
        """Is *color*'s king (default: side to move) attacked by the opponent?"""
        if color is None:
            color = self._pos.side_to_move
        return in_check(self._pos, color, attacked_squares(self._pos, color.opposite))

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, coord: Coord, color: Owner, moves: list[Move]) -> None:
        board = self._board
        row, col = coord
        step = pawn_direction(color)
        start_row = 6 if color == Owner.WHITE else 1
        ahead = row + step

        if not (0 <= ahead <= 7):
            return

        # Pushes
        if board[ahead][col].is_empty:
            self._add_pawn_move(coord, (ahead, col), moves)
            if row == start_row:
                two_ahead = ahead + step
                if board[two_ahead][col].is_empty:
                    moves.append(Move(coord, (two_ahead, col)))

        # Captures
        opponent = color.opposite
        for c in (col - 1, col + 1):
            if in_bounds(ahead, c) and board[ahead][c].owner == opponent:
                self._add_pawn_move(coord, (ahead, c), moves)

        # En passant: the recorded pawn sits beside us; land behind it
        ep = self._pos.en_passant
        if ep is not None:
            ep_row, ep_col = ep
            if ep_row == row and abs(ep_col - col) == 1:
                moves.append(Move(coord, (ahead, ep_col), RemovePiece(ep)))

    @staticmethod
    def _add_pawn_move(from_sq: Coord, to_sq: Coord, moves: list[Move]) -> None:
        if to_sq[0] in (0, 7):
            for kind in PROMOTION_KINDS:
                moves.append(Move(from_sq, to_sq, AddPiece(to_sq, kind)))
        else:
            moves.append(Move(from_sq, to_sq))

    def _gen_stepper(
        self,
        coord: Coord,
        color: Owner,
        targets: tuple[Coord, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for row, col in targets:
            if board[row][col].owner != color:
                moves.append(Move(coord, (row, col)))

    def _gen_sliding(
        self,
        coord: Coord,
        color: Owner,
        rays: tuple[tuple[Coord, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for row, col in ray:
                target = board[row][col]
                if target.is_empty:
                    moves.append(Move(coord, (row, col)))
                    continue
                if target.owner != color:
                    moves.append(Move(coord, (row, col)))
                break

    def _gen_castling(
        self,
        king_sq: Coord,
        color: Owner,
        opponent_attacks: Collection[Coord],
        moves: list[Move],
    ) -> None:
        home, kingside, queenside = _CASTLING_HOMES[color]
        if king_sq != home or king_sq in opponent_attacks:
            return

        board = self._board
        castling = self._pos.castling
        row = home[0]
        rook = Square(PieceKind.ROOK, color)

        if (
            castling & kingside
            and board[row][7] == rook
            and board[row][5].is_empty
            and board[row][6].is_empty
            and (row, 5) not in opponent_attacks
            and (row, 6) not in opponent_attacks
        ):
            moves.append(Move(king_sq, (row, 6), MovePiece((row, 7), (row, 5))))

        if (
            castling & queenside
            and board[row][0] == rook
            and board[row][1].is_empty
            and board[row][2].is_empty
            and board[row][3].is_empty
            and (row, 3) not in opponent_attacks
            and (row, 2) not in opponent_attacks
        ):
            moves.append(Move(king_sq, (row, 2), MovePiece((row, 0), (row, 3))))
