"""FEN parsing and serialisation, plus the plain-text board dump."""

from __future__ import annotations

import logging

from xadreis.core.enums import CastlingRights, Owner, PieceKind
from xadreis.core.errors import ParseError
from xadreis.core.position import Position, empty_board
from xadreis.core.square import Square
from xadreis.core.types import Coord, parse_square, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


# ── FEN ──────────────────────────────────────────────────────────────────────


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    All six fields are required. Any malformed field raises
    :class:`~xadreis.core.errors.ParseError`; nothing is returned on failure.
    """
    parts = fen.split()
    if len(parts) < 6:
        raise ParseError(f"Invalid FEN (need 6 fields, got {len(parts)}): {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts[:6]

    board = _parse_placement(placement, fen)

    # 2. Side to move
    if side_part == "w":
        side = Owner.WHITE
    elif side_part == "b":
        side = Owner.BLACK
    else:
        raise ParseError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise ParseError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    en_passant: Coord | None = None
    if ep_part != "-":
        en_passant = _parse_en_passant(ep_part, side, board)

    # 5–6. Clocks
    halfmove = _parse_counter(half_part, "halfmove clock")
    fullmove = _parse_counter(full_part, "fullmove number")

    position = Position(board, side, castling, en_passant, halfmove, fullmove)
    _LOGGER.debug(
        "Parsed FEN %r: %s to move, castling=%s, en_passant=%s",
        fen,
        side,
        castling_part,
        ep_part,
    )
    return position


def _parse_placement(placement: str, fen: str) -> list[list[Square]]:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ParseError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = empty_board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ParseError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ParseError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[row][col] = Square.from_char(ch)
                except ValueError:
                    raise ParseError(
                        f"Invalid FEN board character {ch!r}: {fen!r}"
                    ) from None
                col += 1
            if col > 8:
                raise ParseError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ParseError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_en_passant(
    ep_part: str, side: Owner, board: list[list[Square]]
) -> Coord:
    """Map the FEN skipped square to the square of the capturable pawn.

    The field must agree with the board: an opposing pawn stands just past the
    skipped square, and both the skipped square and the pawn's starting square
    are empty.
    """
    try:
        row, col = parse_square(ep_part)
    except ValueError:
        raise ParseError(f"Invalid FEN en-passant field: {ep_part!r}") from None
    # Skipped square sits on rank 6 (row 2) when White moves next, rank 3 (row 5)
    # when Black does; the pawn stands one row further along its path.
    if side == Owner.WHITE and row == 2:
        pawn_row, origin_row = 3, 1
    elif side == Owner.BLACK and row == 5:
        pawn_row, origin_row = 4, 6
    else:
        raise ParseError(
            f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
        )

    if board[pawn_row][col] != Square(PieceKind.PAWN, side.opposite):
        raise ParseError(
            f"Invalid FEN en-passant square {ep_part!r}: no pawn to capture"
        )
    if not (board[row][col].is_empty and board[origin_row][col].is_empty):
        raise ParseError(
            f"Invalid FEN en-passant square {ep_part!r}: pawn path is occupied"
        )
    return (pawn_row, col)


def _parse_counter(text: str, name: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ParseError(f"Invalid FEN {name}: {text!r}")
    return int(text)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in pos.board:
        empty = 0
        row = ""
        for square in rank:
            if square.is_empty:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(square)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Owner.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-"
    if pos.en_passant is not None:
        row, col = pos.en_passant
        skipped_row = row - 1 if row == 3 else row + 1
        ep_str = square_name((skipped_row, col))

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )


# ── Board dump ───────────────────────────────────────────────────────────────


def board_dump(pos: Position) -> str:
    """Eight lines of eight space-separated symbols, row 0 (rank 8) first."""
    return "\n".join(" ".join(str(square) for square in rank) for rank in pos.board)


def placement_from_dump(dump: str) -> str:
    """Convert a :func:`board_dump` back into a FEN piece-placement field."""
    lines = dump.strip().splitlines()
    if len(lines) != 8:
        raise ParseError(f"Board dump must have 8 lines, got {len(lines)}")
    ranks: list[str] = []
    for line in lines:
        symbols = line.split()
        if len(symbols) != 8:
            raise ParseError(f"Board dump line must have 8 symbols: {line!r}")
        rank = ""
        empty = 0
        for symbol in symbols:
            if symbol == ".":
                empty += 1
                continue
            if empty:
                rank += str(empty)
                empty = 0
            rank += symbol
        if empty:
            rank += str(empty)
        ranks.append(rank)
    return "/".join(ranks)
