"""Tests for the command-line entry point."""

import io

import pytest

from xadreis.app import RunConfig, build_parser, config_from_args, main, run
from xadreis.core.notation import STARTING_FEN


class TestRunConfig:
    def test_defaults(self) -> None:
        config = RunConfig()
        assert config.fen == STARTING_FEN
        assert config.depth == 3
        assert not config.divide

    def test_from_args(self, kiwipete_fen: str) -> None:
        args = build_parser().parse_args([kiwipete_fen, "--depth", "2", "--divide"])
        config = config_from_args(args)
        assert config == RunConfig(fen=kiwipete_fen, depth=2, divide=True)

    @pytest.mark.parametrize("depth", ["0", "8", "two"])
    def test_rejects_bad_depth(self, depth: str) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--depth", depth])


class TestRun:
    def test_perft_report(self) -> None:
        out = io.StringIO()
        assert run(RunConfig(depth=2), out) == 0
        text = out.getvalue()
        assert text.startswith("r n b q k b n r\n")
        assert "white to move" in text
        assert "  1  20" in text
        assert "  2  400" in text
        assert text.rstrip().endswith("nodes: 400")

    def test_divide_report(self) -> None:
        out = io.StringIO()
        assert run(RunConfig(depth=1, divide=True), out) == 0
        text = out.getvalue()
        assert "e2e4: 1" in text
        assert "nodes: 20" in text

    def test_move_listing(self) -> None:
        out = io.StringIO()
        run(RunConfig(depth=1, show_moves=True), out)
        assert "legal moves (20):" in out.getvalue()

    def test_bad_fen_reports_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        out = io.StringIO()
        assert run(RunConfig(fen="8/8/8 w"), out) == 2
        assert out.getvalue() == ""
        assert capsys.readouterr().err.startswith("error: ")


class TestMain:
    def test_exit_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--depth", "1"])
        assert excinfo.value.code == 0
        assert "nodes: 20" in capsys.readouterr().out
