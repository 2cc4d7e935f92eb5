"""Perft: exhaustive move-tree node counting for move-generator verification.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

from __future__ import annotations

import logging

from xadreis.core.executor import apply_move
from xadreis.core.move_generator import MoveGenerator
from xadreis.core.position import Position

_LOGGER = logging.getLogger(__name__)

PLY_SLOTS = 8  # index 0 unused, plies 1..7


def new_counts() -> list[int]:
    """A zeroed per-ply buffer suitable for :func:`perft`."""
    return [0] * PLY_SLOTS


def perft(position: Position, depth: int, counts: list[int] | None = None) -> int:
    """Count leaf nodes *depth* plies below *position*.

    When *counts* is given, ``counts[ply]`` accumulates how many legal moves
    were generated at tree level ``ply`` (1..depth) across the whole
    traversal. The buffer is added to, not reset.
    """
    if depth < 0:
        raise ValueError("Depth must be >= 0")
    if counts is not None and depth >= len(counts):
        raise ValueError(
            f"Depth {depth} does not fit a per-ply buffer of {len(counts)} slots"
        )

    nodes = _perft(position, depth, 1, counts)
    if counts is not None:
        _LOGGER.debug(
            "perft depth=%d nodes=%d per-ply=%s", depth, nodes, counts[1 : depth + 1]
        )
    return nodes


def _perft(position: Position, depth: int, ply: int, counts: list[int] | None) -> int:
    if depth == 0:
        return 1

    moves = MoveGenerator(position).generate_legal_moves()
    if counts is not None:
        counts[ply] += len(moves)
    if depth == 1:
        return len(moves)

    nodes = 0
    for move in moves:
        nodes += _perft(apply_move(position, move), depth - 1, ply + 1, counts)
    return nodes


def perft_divide(position: Position, depth: int) -> dict[str, int]:
    """Leaf counts below each root move, keyed by long-algebraic move text."""
    if depth < 1:
        raise ValueError("Depth must be >= 1 for perft divide")

    result: dict[str, int] = {}
    for move in MoveGenerator(position).generate_legal_moves():
        result[str(move)] = perft(apply_move(position, move), depth - 1)
    return dict(sorted(result.items()))
