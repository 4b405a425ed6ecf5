import argparse
import sys

import pandas as pd
import pytest

from httpbench import __main__ as entry
from httpbench.cli import load_test, sweep
from httpbench.core.models import ConfigError, RequestOutcome, ResultSet
from httpbench.core.summary import summarize


def parse(argv):
    return load_test.build_parser().parse_args(argv)


def test_flags_map_onto_config():
    args = parse(["-c", "5", "-n", "100", "-u", "http://x/", "-m", "POST", "-d", "a=1", "-t", "2"])
    config = load_test.config_from_args(args)

    assert config.concurrency == 5
    assert config.total_number == 100
    assert config.method == "POST"
    assert config.post_data == "a=1"
    assert config.timeout == 2.0
    assert config.is_count_bounded


def test_timeout_defaults_to_one_second():
    config = load_test.config_from_args(parse(["-c", "1", "-a", "3", "-u", "http://x/"]))
    assert config.timeout == 1.0
    assert config.is_duration_bounded


def test_config_errors_are_raised():
    with pytest.raises(ConfigError):
        load_test.config_from_args(parse(["-n", "1", "-u", "http://x/"]))


@pytest.mark.parametrize(
    "argv",
    [
        ["-n", "10", "-u", "http://x/"],
        ["-c", "2", "-u", "http://x/"],
        ["-c", "2", "-n", "10"],
        ["-c", "2", "-n", "10", "-u", "http://x/", "-m", "delete"],
    ],
)
def test_invalid_flags_exit_with_usage(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        load_test.main(argv)

    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: ")
    assert "usage:" in out


def test_parse_levels():
    assert sweep.parse_levels("1,4, 16") == [1, 4, 16]
    with pytest.raises(argparse.ArgumentTypeError):
        sweep.parse_levels("1,zero")
    with pytest.raises(argparse.ArgumentTypeError):
        sweep.parse_levels("0,2")


def test_sweep_requires_count_or_duration(capsys):
    with pytest.raises(SystemExit) as exc:
        sweep.main(["-u", "http://x/", "--levels", "1,2"])
    assert exc.value.code == 1
    assert "one of -n or -a" in capsys.readouterr().out


def test_entry_point_rejects_unknown_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["httpbench", "frobnicate"])
    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().out


def test_entry_point_dispatches_load_test(monkeypatch):
    seen = {}
    monkeypatch.setattr(sys, "argv", ["httpbench", "load-test", "-c", "1"])
    monkeypatch.setattr(load_test, "main", lambda: seen.setdefault("argv", list(sys.argv)))

    entry.main()
    assert seen["argv"] == ["httpbench", "-c", "1"]


def test_csv_export_includes_breakdown_tables(monkeypatch, tmp_path, capsys):
    outcomes = [RequestOutcome(0.010, 200, 5), RequestOutcome.failure(0.5)]
    stats = summarize(ResultSet(start_time=0.0, end_time=1.0, outcomes=outcomes))

    class StubTester:
        def __init__(self, config, log_level=None):
            self.config = config

        async def run(self):
            return stats

    monkeypatch.setattr(load_test, "LoadTester", StubTester)
    csv_path = tmp_path / "run.csv"
    load_test.main(["-c", "1", "-n", "2", "-u", "http://x/", "--csv", str(csv_path)])

    assert pd.read_csv(csv_path)["Total"].tolist() == [2]
    assert pd.read_csv(tmp_path / "run_status.csv")["Status"].tolist() == [200, 400]
    assert len(pd.read_csv(tmp_path / "run_percentiles.csv")) == 5
    assert "LOAD TEST RESULTS" in capsys.readouterr().out
