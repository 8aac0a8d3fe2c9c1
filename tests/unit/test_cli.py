# tests/unit/test_cli.py
import logging

import pytest
from typer.testing import CliRunner

from yatl import clock, config
from yatl.apps import cli
from yatl.apps.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("YATL_LOG_LEVEL", "YATL_LAP_INTERVAL", "YATL_LAPS"):
        monkeypatch.delenv(key, raising=False)
    config.clear_settings()
    yield
    config.clear_settings()


def _clock(*readings):
    queue = list(readings)

    def now():
        return queue.pop(0) if len(queue) > 1 else queue[0]

    return now


def test_format_prints_human_string():
    result = runner.invoke(app, ["format", "13674"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "13us"


def test_format_negative_exits_2_with_one_message():
    result = runner.invoke(app, ["format", "--", "-5"])
    assert result.exit_code == 2
    assert result.output.count("non-negative") == 1


def test_run_prints_each_lap():
    result = runner.invoke(app, ["run", "--laps", "2", "--interval", "0"])
    assert result.exit_code == 0, result.output
    lines = result.stdout.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("lap 1: ")
    assert lines[1].startswith("lap 2: ")


def test_run_uses_env_defaults(monkeypatch):
    monkeypatch.setenv("YATL_LAPS", "4")
    monkeypatch.setenv("YATL_LAP_INTERVAL", "0")
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 0, result.output
    assert len(result.stdout.strip().splitlines()) == 4


def test_unknown_log_level_rejected():
    result = runner.invoke(app, ["--log-level", "loud", "format", "1"])
    assert result.exit_code == 2


def test_format_ignores_bad_run_variable(monkeypatch):
    monkeypatch.setenv("YATL_LAPS", "many")
    result = runner.invoke(app, ["format", "5"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "5ns"


def test_run_flags_override_bad_env(monkeypatch):
    monkeypatch.setenv("YATL_LAPS", "0")
    monkeypatch.setenv("YATL_LAP_INTERVAL", "soon")
    result = runner.invoke(app, ["run", "--laps", "1", "--interval", "0"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip().startswith("lap 1: ")


def test_run_reports_bad_env_without_traceback(monkeypatch):
    monkeypatch.setenv("YATL_LAPS", "0")
    result = runner.invoke(app, ["run", "--interval", "0"])
    assert result.exit_code == 2
    assert "[yatl] invalid setting laps" in result.output
    assert "Traceback" not in result.output


def test_bad_log_level_env_exits_2(monkeypatch):
    monkeypatch.setenv("YATL_LOG_LEVEL", "LOUD")
    result = runner.invoke(app, ["format", "5"])
    assert result.exit_code == 2
    assert "[yatl] invalid setting level" in result.output


def test_run_clock_going_backwards_exits_1(monkeypatch):
    monkeypatch.setattr(clock, "now_utc_ns", _clock(5_000, 6_000, 4_000))
    result = runner.invoke(app, ["run", "--laps", "3", "--interval", "0"])
    assert result.exit_code == 1
    assert "[yatl] lap 2 failed: Internal Error" in result.output
    assert "lap 1: " not in result.stdout


def test_run_logs_each_lap_at_debug(monkeypatch, caplog):
    monkeypatch.setattr(clock, "now_utc_ns", _clock(1_000, 1_500, 4_000))
    real_setup = cli.setup_logging

    def _setup(level):
        logger = real_setup(level)
        logger.addHandler(caplog.handler)
        return logger

    monkeypatch.setattr(cli, "setup_logging", _setup)
    result = runner.invoke(app, ["--log-level", "debug", "run", "--laps", "2", "--interval", "0"])

    assert result.exit_code == 0, result.output
    laps = [r.getMessage() for r in caplog.records if r.name == "yatl.cli" and r.getMessage().startswith("lap")]
    assert laps == ["lap 1: 500ns", "lap 2: 3000ns"]
    assert all(r.levelno == logging.DEBUG for r in caplog.records if r.name == "yatl.cli")
    printed = [line for line in result.stdout.splitlines() if line.startswith("lap ")]
    assert printed == ["lap 1: 500ns", "lap 2: 3us"]
