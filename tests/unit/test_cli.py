"""Unit tests for the simm-calc command line entry point."""

from __future__ import annotations

import polars as pl
import pytest

from simm_calc.cli import build_parser, main


@pytest.fixture
def usd_crif(crif_file):
    return crif_file([("RatesFX", "Risk_IRCurve", "USD", "1", "5y", "OIS", 1000000.0)])


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["crif.csv"])

        assert args.simm_version == "2.6"
        assert args.currency == "USD"
        assert args.rate == 1.0
        assert args.workers is None
        assert args.output is None

    def test_unknown_version_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["crif.csv", "--version", "3.0"])


class TestMain:
    def test_successful_run(self, usd_crif, capsys):
        exit_code = main([str(usd_crif), "--version", "2.5"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "ISDA SIMM 2.5 (USD)" in out
        assert "52000000.0" in out

    def test_missing_file(self, tmp_path, capsys):
        exit_code = main([str(tmp_path / "missing.csv")])

        assert exit_code == 1
        assert "VAL002" in capsys.readouterr().out

    def test_invalid_records(self, crif_file, capsys):
        path = crif_file([("RatesFX", "Risk_Bogus", "USD", "1", "5y", "OIS", 1.0)])

        exit_code = main([str(path)])

        assert exit_code == 1
        assert "DQ004" in capsys.readouterr().out

    def test_export_breakdown(self, usd_crif, tmp_path):
        output = tmp_path / "breakdown.csv"

        exit_code = main([str(usd_crif), "--output", str(output)])

        assert exit_code == 0
        breakdown = pl.read_csv(output)
        assert breakdown.columns[0] == "level"
        assert breakdown.height > 2

    def test_unsupported_export_format(self, usd_crif, tmp_path, capsys):
        exit_code = main([str(usd_crif), "--output", str(tmp_path / "breakdown.xlsx")])

        assert exit_code == 1
        assert "Unsupported export format" in capsys.readouterr().err

    def test_reporting_currency(self, usd_crif, capsys):
        exit_code = main([str(usd_crif), "--version", "2.5", "--currency", "EUR", "--rate", "0.5"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "ISDA SIMM 2.5 (EUR)" in out
        assert "26000000.0" in out
