"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from xadreis.core.notation import STARTING_FEN, position_from_fen
from xadreis.core.position import Position

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"
POS4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"
POS5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"
ENDGAME = "8/5k2/3p4/1p1Pp2p/pP2Pp1P/P4P1K/8/8 b - - 99 50"

# Positions rich in special moves, used by property-style tests.
SAMPLE_FENS = (
    STARTING_FEN,
    KIWIPETE,
    POS3,
    POS4,
    POS5,
    ENDGAME,
    "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3",
    "r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1",
    "k2r4/4P3/8/8/8/8/8/4K3 w - - 0 1",
)


@pytest.fixture(params=SAMPLE_FENS)
def sample_fen(request: pytest.FixtureRequest) -> str:
    """Each of the special-move-rich sample positions in turn, as FEN."""
    return request.param


@pytest.fixture
def start() -> Position:
    """Fresh standard starting position."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def kiwipete_fen() -> str:
    return KIWIPETE


@pytest.fixture
def kiwipete() -> Position:
    return position_from_fen(KIWIPETE)


@pytest.fixture
def pos3() -> Position:
    return position_from_fen(POS3)


@pytest.fixture
def pos4() -> Position:
    return position_from_fen(POS4)


@pytest.fixture
def pos5() -> Position:
    return position_from_fen(POS5)


@pytest.fixture
def endgame() -> Position:
    return position_from_fen(ENDGAME)
