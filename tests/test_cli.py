"""Command-line integration tests."""

import argparse

import pytest

from durationflex import Duration
from durationflex.cli import duration_type, main


class TestDurationType:
    def test_parses(self):
        assert duration_type("1h30m") == Duration(5400)

    def test_error_is_argument_type_error(self):
        with pytest.raises(argparse.ArgumentTypeError, match="at position 2"):
            duration_type("5m3h")

    def test_with_argparse(self):
        parser = argparse.ArgumentParser()
        parser.add_argument("--timeout", type=duration_type, default=Duration(300))
        assert parser.parse_args(["--timeout", "90m"]).timeout == Duration(5400)
        assert parser.parse_args([]).timeout == Duration(300)

    def test_argparse_reports_error(self, capsys):
        parser = argparse.ArgumentParser(prog="app")
        parser.add_argument("--timeout", type=duration_type)
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--timeout", "1h x"])
        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert "invalid duration '1h x'" in err
        assert "unexpected characters in duration" in err

    def test_help_shows_canonical_default(self, capsys):
        parser = argparse.ArgumentParser(prog="app")
        parser.add_argument(
            "--timeout", type=duration_type, default=Duration(5400), help="default %(default)s"
        )
        with pytest.raises(SystemExit):
            parser.parse_args(["--help"])
        assert "default 1h30m" in capsys.readouterr().out


class TestMain:
    def test_normalize(self, capsys):
        assert main(["normalize", "90m", "1w8d"]) == 0
        assert capsys.readouterr().out.splitlines() == ["1h30m", "2w1d"]

    def test_normalize_numeric(self, capsys):
        assert main(["normalize", "--allow-numeric", "5400", "0s"]) == 0
        assert capsys.readouterr().out.splitlines() == ["1h30m", "0s"]

    def test_normalize_numeric_too_wide(self, capsys):
        assert main(["normalize", "--allow-numeric", "9" * 5000]) == 1
        assert "duration out of range" in capsys.readouterr().err

    def test_normalize_numeric_leading_zeros(self, capsys):
        assert main(["normalize", "--allow-numeric", "0" * 5000 + "60"]) == 0
        assert capsys.readouterr().out.strip() == "1m"

    def test_normalize_rejects_numeric_by_default(self, capsys):
        assert main(["normalize", "5400"]) == 1
        assert "unexpected characters" in capsys.readouterr().err

    def test_seconds(self, capsys):
        assert main(["seconds", "1h23m", "0s"]) == 0
        assert capsys.readouterr().out.splitlines() == ["4980", "0"]

    def test_from_seconds(self, capsys):
        assert main(["from-seconds", "1208999", "0"]) == 0
        assert capsys.readouterr().out.splitlines() == ["1w6d23h49m59s", "0s"]

    def test_invalid_value(self, capsys):
        assert main(["seconds", "3h3h"]) == 1
        err = capsys.readouterr().err
        assert "durationflex: invalid duration '3h3h'" in err
        assert "at position 2" in err

    def test_missing_command(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_verbose(self, capsys):
        assert main(["--verbose", "seconds", "1m"]) == 0
        assert capsys.readouterr().out.strip() == "60"
