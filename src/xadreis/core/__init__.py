"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from xadreis.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from xadreis.core.attacks import attacked_squares, in_check
from xadreis.core.enums import CastlingRights, Owner, PieceKind
from xadreis.core.errors import InvariantViolation, ParseError
from xadreis.core.executor import apply_move
from xadreis.core.move import AddPiece, Move, MovePiece, RemovePiece, SideEffect
from xadreis.core.move_generator import MoveGenerator
from xadreis.core.notation import (
    STARTING_FEN,
    board_dump,
    placement_from_dump,
    position_from_fen,
    position_to_fen,
)
from xadreis.core.perft import new_counts, perft, perft_divide
from xadreis.core.position import Position
from xadreis.core.square import EMPTY, Square
from xadreis.core.types import Coord, in_bounds, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Owner",
    "PieceKind",
    # Types / helpers
    "Coord",
    "in_bounds",
    "parse_square",
    "square_name",
    # Errors
    "InvariantViolation",
    "ParseError",
    # Domain objects
    "EMPTY",
    "AddPiece",
    "Move",
    "MoveGenerator",
    "MovePiece",
    "Position",
    "RemovePiece",
    "SideEffect",
    "Square",
    # Rules
    "apply_move",
    "attacked_squares",
    "in_check",
    # Perft
    "new_counts",
    "perft",
    "perft_divide",
    # Notation
    "STARTING_FEN",
    "board_dump",
    "placement_from_dump",
    "position_from_fen",
    "position_to_fen",
]
