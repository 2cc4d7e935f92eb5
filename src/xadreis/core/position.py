"""Position — complete game state: board grid plus metadata."""

from __future__ import annotations

from xadreis.core.enums import CastlingRights, Owner, PieceKind
from xadreis.core.square import EMPTY, Square
from xadreis.core.types import Coord

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def empty_board() -> list[list[Square]]:
    return [[EMPTY] * 8 for _ in range(8)]


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    ``en_passant`` holds the square of the pawn that has just made a double
    step and may be captured on the very next move; it is ``None`` otherwise.
    Positions are treated as values: simulations work on :meth:`copy`.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: list[list[Square]] | None = None,
        side_to_move: Owner = Owner.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Coord | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else self._initial_board()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Square:
        row, col = coord
        return self.board[row][col]

    def __setitem__(self, coord: Coord, square: Square) -> None:
        row, col = coord
        self.board[row][col] = square

    # -- Query helpers ------------------------------------------------------

    def pieces(self, owner: Owner) -> list[tuple[Coord, Square]]:
        """Occupied squares belonging to *owner*, in row-major order."""
        found: list[tuple[Coord, Square]] = []
        for row, rank in enumerate(self.board):
            for col, square in enumerate(rank):
                if square.owner == owner:
                    found.append(((row, col), square))
        return found

    def king_square(self, owner: Owner) -> Coord | None:
        """Square of *owner*'s king, or ``None`` if it has none."""
        for row, rank in enumerate(self.board):
            for col, square in enumerate(rank):
                if square.kind == PieceKind.KING and square.owner == owner:
                    return (row, col)
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Position:
        """Independent copy; Squares are immutable so rows are copied shallowly."""
        return Position(
            board=[rank.copy() for rank in self.board],
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    # -- Factory ------------------------------------------------------------

    @staticmethod
    def _initial_board() -> list[list[Square]]:
        board = empty_board()
        for col, kind in enumerate(_BACK_RANK):
            board[0][col] = Square(kind, Owner.BLACK)
            board[1][col] = Square(PieceKind.PAWN, Owner.BLACK)
            board[6][col] = Square(PieceKind.PAWN, Owner.WHITE)
            board[7][col] = Square(kind, Owner.WHITE)
        return board

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        return cls()

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        rows = [
            f"{8 - row} {' '.join(str(sq) for sq in rank)}"
            for row, rank in enumerate(self.board)
        ]
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
