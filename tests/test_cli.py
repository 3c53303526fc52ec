"""
Tests for the command line battle runner.
"""
import os

from cybertron.cli import build_parser, main
from cybertron.game.roster_loader import RosterLoader
from tests.builders import TransformerBuilder


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["roster.yaml"])

        assert args.roster == "roster.yaml"
        assert args.rules is None
        assert not args.forecast
        assert not args.debug


class TestMain:
    """Test end-to-end runs."""

    def test_example_battle(self, capsys, example_roster_path):
        assert main([example_roster_path]) == 0

        out = capsys.readouterr().out
        assert "Rounds fought: 2" in out
        assert "  1. Bumblebee vs Starscream: Autobots win" in out
        assert "  2. Ironhide vs Soundwave: Decepticons win" in out
        assert "Autobots survivors: Bumblebee, Hubcap" in out
        assert "Decepticons survivors: Soundwave" in out
        assert out.rstrip().endswith("Result: Tie")

    def test_forecast_printed_first(self, capsys, example_roster_path):
        assert main([example_roster_path, "--forecast"]) == 0

        out = capsys.readouterr().out
        assert out.index("Planned rounds: 2") < out.index("Rounds fought: 2")

    def test_missing_roster(self, capsys, tmp_path):
        assert main([str(tmp_path / "missing.yaml")]) == 1
        assert "Roster file not found" in capsys.readouterr().err

    def test_missing_rules(self, capsys, tmp_path, example_roster_path):
        assert main([example_roster_path, "--rules", str(tmp_path / "rules.yaml")]) == 1
        assert "Combat rules file not found" in capsys.readouterr().err

    def test_custom_rules(self, capsys, tmp_path, example_roster_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text("combat_rules:\n  legendary_names: [Ironhide]\n", encoding="utf-8")

        assert main([example_roster_path, "--rules", str(rules_file)]) == 0
        out = capsys.readouterr().out
        assert "  2. Ironhide vs Soundwave: Autobots win" in out
        assert out.rstrip().endswith("Result: Autobots win")

    def test_debug_lists_warnings(self, capsys, tmp_path):
        roster_file = tmp_path / "roster.yaml"
        RosterLoader.save_to_file([
            TransformerBuilder.autobot("Rusty", strength=-1),
            TransformerBuilder.decepticon("Dent"),
        ], roster_file)

        assert main([str(roster_file), "--debug"]) == 0

        out = capsys.readouterr().out
        assert "[WRN] Autobot Rusty: strength must not be negative (got -1)" in out
        assert "[BTL]" in out

    def test_log_saved(self, capsys, tmp_path, example_roster_path):
        log_dir = tmp_path / "logs"

        assert main([example_roster_path, "--log-dir", str(log_dir)]) == 0

        assert "Log saved to" in capsys.readouterr().out
        assert len(os.listdir(log_dir)) == 1
