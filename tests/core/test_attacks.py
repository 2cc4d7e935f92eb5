"""Tests for attack maps and check detection."""

from xadreis.core.attacks import attacked_squares, attacks_from, in_check
from xadreis.core.enums import Owner
from xadreis.core.notation import position_from_fen
from xadreis.core.position import Position
from xadreis.core.types import parse_square, square_name


def _names(coords) -> set[str]:
    return {square_name(c) for c in coords}


class TestAttackGenerator:
    def test_pawn_attacks_only_diagonals(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 0 1")
        assert _names(attacks_from(pos, parse_square("e2"))) == {"d3", "f3"}

    def test_black_pawn_attacks_downwards(self) -> None:
        pos = position_from_fen("4k3/4p3/8/8/8/8/8/4K3 b - - 0 1")
        assert _names(attacks_from(pos, parse_square("e7"))) == {"d6", "f6"}

    def test_edge_pawn_has_one_attack(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/P7/4K3 w - - 0 1")
        assert _names(attacks_from(pos, parse_square("a2"))) == {"b3"}

    def test_square_ahead_of_pawn_not_attacked(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/8 w - - 0 1")
        attacks = attacked_squares(pos, Owner.WHITE)
        assert parse_square("e3") not in attacks
        assert parse_square("e4") not in attacks

    def test_knight_in_corner(self) -> None:
        pos = position_from_fen("N3k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert _names(attacks_from(pos, parse_square("a8"))) == {"b6", "c7"}

    def test_king_in_centre(self) -> None:
        pos = position_from_fen("4k3/8/8/8/3K4/8/8/8 w - - 0 1")
        assert len(attacks_from(pos, parse_square("d4"))) == 8

    def test_rook_on_open_board(self) -> None:
        pos = position_from_fen("7k/8/8/8/3R4/8/8/K7 w - - 0 1")
        assert len(attacks_from(pos, parse_square("d4"))) == 14

    def test_ray_stops_on_first_piece_of_either_colour(self) -> None:
        # Rook d4, own pawn d6, enemy pawn f4
        pos = position_from_fen("7k/8/3P4/8/3R1p2/8/8/K7 w - - 0 1")
        attacks = _names(attacks_from(pos, parse_square("d4")))
        assert "d5" in attacks
        assert "d6" in attacks
        assert "d7" not in attacks
        assert "f4" in attacks
        assert "g4" not in attacks

    def test_starting_rook_defends_own_pawn(self, start: Position) -> None:
        attacks = attacked_squares(start, Owner.WHITE)
        assert parse_square("a2") in attacks
        assert parse_square("a3") in attacks
        assert parse_square("e4") not in attacks

    def test_queen_combines_rook_and_bishop(self) -> None:
        pos = position_from_fen("7k/8/8/8/3Q4/8/8/K7 w - - 0 1")
        assert len(attacks_from(pos, parse_square("d4"))) == 27

    def test_empty_square_attacks_nothing(self, start: Position) -> None:
        assert attacks_from(start, parse_square("e4")) == []


class TestCheckDetector:
    def test_starting_not_in_check(self, start: Position) -> None:
        assert not in_check(start, Owner.WHITE, attacked_squares(start, Owner.BLACK))
        assert not in_check(start, Owner.BLACK, attacked_squares(start, Owner.WHITE))

    def test_fools_mate_in_check(self) -> None:
        pos = position_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        assert in_check(pos, Owner.WHITE, attacked_squares(pos, Owner.BLACK))

    def test_uses_supplied_attack_set(self, start: Position) -> None:
        assert in_check(start, Owner.WHITE, {parse_square("e1")})
        assert not in_check(start, Owner.WHITE, [parse_square("e2")])

    def test_missing_king_is_never_in_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4r3 w - - 0 1")
        assert not in_check(pos, Owner.WHITE, attacked_squares(pos, Owner.BLACK))
