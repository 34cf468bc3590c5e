"""Tests for the command-line interface."""

import json
import logging

import pytest
from click.testing import CliRunner

from pricepath.__main__ import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("PP_LOG_DIR", str(tmp_path / "logs"))
    yield CliRunner()
    # dictConfig attaches a file handler to the root logger; release it
    for handler in list(logging.getLogger().handlers):
        handler.close()
        logging.getLogger().removeHandler(handler)


class TestSimulateCommand:
    def test_prints_summary(self, runner):
        result = runner.invoke(cli, [
            "simulate", "--price", "100", "--volatility", "20",
            "--days", "5", "--paths", "200", "--seed", "1",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert "simulaciones" not in data
        assert len(data["promedio"]) == 6
        assert data["var_95"] >= 0

    def test_full_output_includes_matrix(self, runner):
        result = runner.invoke(cli, [
            "simulate", "-p", "50", "-s", "10", "-d", "2", "-n", "100", "--seed", "3", "--full",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["simulaciones"]) == 100
        assert len(data["simulaciones"][0]) == 3

    def test_seeded_runs_match(self, runner):
        args = ["simulate", "-p", "100", "-s", "30", "-d", "10", "--seed", "9"]
        assert runner.invoke(cli, args).output == runner.invoke(cli, args).output

    def test_rejection_exits_with_message(self, runner):
        result = runner.invoke(cli, [
            "simulate", "--price", "100", "--volatility", "250", "--days", "5",
        ])
        assert result.exit_code == 2
        assert "La volatilidad debe estar entre 0 y 200" in result.output
