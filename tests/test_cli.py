"""Tests for the command line entry point (headless runs only)."""

import json

import pytest

from motionlab.cli import main


def test_run_until_two_seconds(capsys) -> None:
    assert main(["--until", "2"]) == 0
    out = capsys.readouterr().out
    assert "t = 2.00 s  x = 12.00 m  v = 7.00 m/s  started = True" in out


def test_run_to_the_end(capsys) -> None:
    assert main(["--v0", "0", "--a", "2"]) == 0
    out = capsys.readouterr().out
    assert "t = 10.00 s  x = 100.00 m  v = 20.00 m/s" in out


def test_waiting_for_start_time(capsys) -> None:
    assert main(["--t0", "3", "--until", "1"]) == 0
    out = capsys.readouterr().out
    assert "x = 0.00 m  v = 5.00 m/s  started = False" in out


def test_double_speed(capsys) -> None:
    assert main(["--speed", "2", "--until", "4"]) == 0
    assert "t = 4.00 s" in capsys.readouterr().out


def test_invalid_speed(capsys) -> None:
    assert main(["--speed", "3"]) == 2
    assert "error" in capsys.readouterr().err


def test_non_finite_parameter(capsys) -> None:
    assert main(["--v0", "nan"]) == 2
    assert "v0" in capsys.readouterr().err


def test_csv_and_table(tmp_path, capsys) -> None:
    csv_path = tmp_path / "series.csv"
    assert main(["--until", "1", "--csv", str(csv_path), "--table"]) == 0
    lines = csv_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "t,x,v"
    assert lines[-1] == "1.00,5.50,6.00"
    assert len(lines) == 7
    out = capsys.readouterr().out
    assert out.count("\n") == 7


def test_config_file_with_overrides(tmp_path, capsys) -> None:
    cfg = tmp_path / "scenario.json"
    cfg.write_text(
        json.dumps({"parameters": {"x0": 10, "v0": 0, "a": 0}, "clock": {"max_duration": 3}}),
        encoding="utf-8",
    )
    saved = tmp_path / "effective.json"
    assert main(["--config", str(cfg), "--v0", "1", "--save-scenario", str(saved)]) == 0
    assert "t = 3.00 s  x = 13.00 m  v = 1.00 m/s" in capsys.readouterr().out
    data = json.loads(saved.read_text(encoding="utf-8"))
    assert data["parameters"] == {"x0": 10.0, "v0": 1.0, "a": 0.0, "t0": 0.0}
    assert data["clock"]["max_duration"] == 3


def test_missing_config_file(tmp_path, capsys) -> None:
    assert main(["--config", str(tmp_path / "nope.json")]) == 2


def test_plot_output(tmp_path) -> None:
    pytest.importorskip("matplotlib")
    import matplotlib

    matplotlib.use("Agg")
    png = tmp_path / "plot.png"
    assert main(["--until", "1", "--plot", str(png)]) == 0
    assert png.exists() and png.stat().st_size > 0
