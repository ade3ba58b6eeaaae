"""Tests for the command line interface (main.py)."""

import logging

import pytest
from typer.testing import CliRunner

from config.settings import Config, save_config
from main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logging.getLogger("holdem").handlers.clear()


class TestNutsCommand:
    def test_flop(self):
        result = runner.invoke(app, ["nuts", "As Ks Qs"])
        assert result.exit_code == 0
        assert "Js Ts" in result.output
        assert "Holes" in result.output

    def test_paired_board(self):
        result = runner.invoke(app, ["nuts", "Ks Kd 7c 7h 2s"])
        assert result.exit_code == 0
        assert "KK" in result.output

    @pytest.mark.parametrize("board", ["Ah Kh", "As As Kd", "Zz Kh Qh"])
    def test_invalid_board(self, board):
        result = runner.invoke(app, ["nuts", board])
        assert result.exit_code == 1

    def test_unknown_mode(self):
        result = runner.invoke(app, ["nuts", "As Ks Qs", "--mode", "sixel"])
        assert result.exit_code == 1


class TestShowdownCommand:
    def test_winner(self):
        result = runner.invoke(app, ["showdown", "2c 7d 9h Ks 4s", "Ah Kd", "Qh Kc"])
        assert result.exit_code == 0
        assert "Winner: A" in result.output

    def test_chop_and_unbeatable(self):
        result = runner.invoke(app, ["showdown", "Ah Kh Qh Jh Th", "2c 3c", "4d 5d"])
        assert result.exit_code == 0
        assert "Chop" in result.output
        assert "A holds an unbeatable hand" in result.output

    def test_flop_board(self):
        result = runner.invoke(app, ["showdown", "Ah 7d 2c", "As Kd", "7h 7c"])
        assert result.exit_code == 0
        assert "Winner: B" in result.output
        assert "Trips" in result.output

    def test_preflop_board(self):
        result = runner.invoke(app, ["showdown", "", "As Ks", "Qc Qd"])
        assert result.exit_code == 1
        assert "flop" in result.output

    def test_overlapping_hole(self):
        result = runner.invoke(app, ["showdown", "2c 7d 9h", "2c Kd", "Qh Kc"])
        assert result.exit_code == 1

    def test_holes_sharing_a_card(self):
        result = runner.invoke(app, ["showdown", "2c 7d 9h", "As Kd", "As Qc"])
        assert result.exit_code == 1
        assert "Duplicate card: As" in result.output


class TestRankCommand:
    def test_seven_cards(self):
        result = runner.invoke(app, ["rank", "2h 5h 6d 7h 8c 9h Kh"])
        assert result.exit_code == 0
        assert "Flush (K9752)" in result.output

    def test_too_few_cards(self):
        result = runner.invoke(app, ["rank", "2h 5h 6d"])
        assert result.exit_code == 1


class TestDeckAndInfo:
    def test_deck(self):
        result = runner.invoke(app, ["deck"])
        assert result.exit_code == 0
        assert "As" in result.output
        assert "2s" in result.output

    def test_deck_unicode(self):
        result = runner.invoke(app, ["deck", "--mode", "unicode"])
        assert result.exit_code == 0
        assert "♠" in result.output

    def test_info_with_config(self, tmp_path):
        config = Config()
        config.evaluator.workers = 2
        path = tmp_path / "config.yaml"
        save_config(config, path)

        result = runner.invoke(app, ["info", "--config", str(path)])
        assert result.exit_code == 0
        assert "Workers" in result.output

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["info", "--config", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
