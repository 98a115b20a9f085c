"""
Unit tests for the command-line entry point.
"""

import io
import json
import logging

import pytest

import mergesort.__main__ as cli
from mergesort.__main__ import build_parser, main
from mergesort.sorter import sort_with_stats


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MERGESORT_* variables from the outer shell out of the tests."""
    for name in (
        "MERGESORT_STRATEGY",
        "MERGESORT_RECURSIVE_MERGE_LIMIT",
        "MERGESORT_LOG_LEVEL",
        "MERGESORT_LOG_FORMAT",
        "MERGESORT_STATS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestCLI:
    """Tests for main()."""

    def test_sort_arguments(self, capsys):
        """Test sorting values given on the command line."""
        assert main(["3", "1", "2"]) == 0

        assert capsys.readouterr().out.strip() == "1 2 3"

    def test_sort_stdin(self, capsys, monkeypatch):
        """Test reading values from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("5 4\n3 2 1\n"))

        assert main([]) == 0
        assert capsys.readouterr().out.strip() == "1 2 3 4 5"

    def test_empty_stdin(self, capsys, monkeypatch):
        """Test that empty input prints an empty line."""
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        assert main([]) == 0
        assert capsys.readouterr().out == "\n"

    def test_string_type(self, capsys):
        """Test sorting strings."""
        assert main(["--type", "str", "pear", "apple", "fig"]) == 0

        assert capsys.readouterr().out.strip() == "apple fig pear"

    def test_float_type(self, capsys):
        """Test sorting floats."""
        assert main(["-t", "float", "2.5", "-1", "0"]) == 0

        assert capsys.readouterr().out.strip() == "-1.0 0.0 2.5"

    def test_bad_value(self, capsys):
        """Test that unparsable values exit with code 2."""
        with pytest.raises(SystemExit) as exc_info:
            main(["1", "two"])

        assert exc_info.value.code == 2
        assert "cannot convert" in capsys.readouterr().err

    @pytest.mark.parametrize("strategy", ["iterative", "recursive", "lazy"])
    def test_strategy(self, capsys, strategy):
        """Test every strategy from the command line."""
        assert main(["--strategy", strategy, "4", "3", "2", "1", "0"]) == 0

        assert capsys.readouterr().out.strip() == "0 1 2 3 4"

    def test_stats(self, capsys):
        """Test that --stats prints the record to stderr."""
        assert main(["--stats", "2", "1"]) == 0

        captured = capsys.readouterr()
        assert captured.out.strip() == "1 2"
        assert "strategy=iterative n=2" in captured.err

    def test_verify(self, capsys):
        """Test that --verify passes on a correct sort."""
        assert main(["--verify", "9", "8", "7"]) == 0

        assert capsys.readouterr().out.strip() == "7 8 9"

    def test_sort_error(self, capsys, monkeypatch):
        """Test that a sort failure exits with code 1."""
        monkeypatch.setenv("MERGESORT_RECURSIVE_MERGE_LIMIT", "2")

        assert main(["--strategy", "recursive", "3", "2", "1"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_env_config(self, monkeypatch):
        """Test that a bad environment config is a usage error."""
        monkeypatch.setenv("MERGESORT_LOG_FORMAT", "xml")

        with pytest.raises(SystemExit) as exc_info:
            main(["1"])

        assert exc_info.value.code == 2


class TestCLIFailuresAndFormats:
    """Tests for --log-format and the failure paths of main()."""

    def test_stats_json(self, capsys):
        """Test that --log-format json prints the stats record as JSON."""
        assert main(["--stats", "--log-format", "json", "2", "1"]) == 0

        captured = capsys.readouterr()
        json_lines = [line for line in captured.err.splitlines() if line.startswith("{")]
        assert captured.out.strip() == "1 2"
        assert json_lines
        record = json.loads(json_lines[-1])
        assert record["strategy"] == "iterative"
        assert record["input_length"] == 2
        assert record["merges"] == 1
        assert "strategy=iterative n=2" not in captured.err

    def test_stats_json_from_env(self, capsys, monkeypatch):
        """Test that MERGESORT_LOG_FORMAT also selects the JSON record."""
        monkeypatch.setenv("MERGESORT_LOG_FORMAT", "json")

        assert main(["--stats", "3", "1", "2"]) == 0

        json_lines = [
            line for line in capsys.readouterr().err.splitlines() if line.startswith("{")
        ]
        assert json.loads(json_lines[-1])["input_length"] == 3

    def test_sort_error_is_logged(self, caplog, monkeypatch):
        """Test that a sort failure emits an ERROR record."""
        monkeypatch.setenv("MERGESORT_RECURSIVE_MERGE_LIMIT", "2")

        with caplog.at_level(logging.ERROR, logger="mergesort"):
            assert main(["--strategy", "recursive", "3", "2", "1"]) == 1

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert errors
        assert errors[-1].name == "mergesort.cli"
        assert "Sort failed" in errors[-1].getMessage()

    def test_verify_failure(self, capsys, caplog, monkeypatch):
        """Test that --verify exits 1 when the result is not sorted."""
        def reversed_sort(values, **kwargs):
            result, stats = sort_with_stats(values, **kwargs)
            return list(reversed(result)), stats

        monkeypatch.setattr(cli, "sort_with_stats", reversed_sort)

        with caplog.at_level(logging.ERROR, logger="mergesort"):
            assert main(["--verify", "1", "3", "2"]) == 1

        captured = capsys.readouterr()
        assert captured.out.strip() == "3 2 1"
        assert "verification failed" in captured.err
        assert any("Verification failed" in r.getMessage() for r in caplog.records)

    def test_verify_failure_on_lost_element(self, capsys, monkeypatch):
        """Test that --verify catches a sorted result that dropped a value."""
        def dropping_sort(values, **kwargs):
            result, stats = sort_with_stats(values, **kwargs)
            return result[:-1], stats

        monkeypatch.setattr(cli, "sort_with_stats", dropping_sort)

        assert main(["--verify", "5", "4", "6"]) == 1
        assert "verification failed" in capsys.readouterr().err


class TestParser:
    """Tests for build_parser()."""

    def test_defaults(self):
        """Test parser defaults."""
        args = build_parser().parse_args([])

        assert args.values == []
        assert args.type == "int"
        assert args.strategy is None
        assert args.stats is False
        assert args.verify is False

    def test_rejects_unknown_strategy(self):
        """Test that argparse rejects unknown strategies."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--strategy", "bubble"])
