"""Command-line entry point: show a position, its legal moves and perft counts."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from xadreis.core.errors import ParseError
from xadreis.core.move_generator import MoveGenerator
from xadreis.core.notation import STARTING_FEN, board_dump, position_from_fen
from xadreis.core.perft import PLY_SLOTS, new_counts, perft, perft_divide

_LOGGER = logging.getLogger(__name__)

MAX_DEPTH = PLY_SLOTS - 1
DEFAULT_DEPTH = 3


@dataclass(slots=True, frozen=True)
class RunConfig:
    """What to analyse and how deep."""

    fen: str = STARTING_FEN
    depth: int = DEFAULT_DEPTH
    divide: bool = False
    show_moves: bool = False


def _depth(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {text!r}") from None
    if not (1 <= value <= MAX_DEPTH):
        raise argparse.ArgumentTypeError(f"depth must be between 1 and {MAX_DEPTH}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xadreis",
        description="Count legal move-tree nodes (perft) from a FEN position.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=STARTING_FEN,
        help="position descriptor (default: standard starting position)",
    )
    parser.add_argument(
        "-d", "--depth", type=_depth, default=DEFAULT_DEPTH, help="perft depth"
    )
    parser.add_argument(
        "--divide", action="store_true", help="break the total down by root move"
    )
    parser.add_argument(
        "--moves", action="store_true", help="list the legal moves of the position"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        fen=args.fen,
        depth=args.depth,
        divide=args.divide,
        show_moves=args.moves,
    )


def run(config: RunConfig, out: TextIO | None = None) -> int:
    """Analyse ``config.fen`` and write a report to *out*. Returns an exit code."""
    out = sys.stdout if out is None else out
    try:
        position = position_from_fen(config.fen)
    except ParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(board_dump(position), file=out)
    print(f"\n{position.side_to_move!s} to move", file=out)

    if config.show_moves:
        moves = MoveGenerator(position).generate_legal_moves()
        listing = " ".join(sorted(str(move) for move in moves))
        print(f"legal moves ({len(moves)}): {listing}", file=out)

    if config.divide:
        breakdown = perft_divide(position, config.depth)
        for move_text, nodes in breakdown.items():
            print(f"{move_text}: {nodes}", file=out)
        print(f"\nnodes: {sum(breakdown.values())}", file=out)
        return 0

    counts = new_counts()
    nodes = perft(position, config.depth, counts)
    print("\nply  moves", file=out)
    for ply in range(1, config.depth + 1):
        print(f"{ply:>3}  {counts[ply]}", file=out)
    print(f"\nnodes: {nodes}", file=out)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, configure logging and run."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)
    _LOGGER.debug("Running with %s", config)
    sys.exit(run(config))


if __name__ == "__main__":
    main()
