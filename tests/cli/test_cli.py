"""Tests for the goalpace CLI."""

from typer.testing import CliRunner

from cli.cli import app

runner = CliRunner()


def test_plan_prints_days_and_phases():
    result = runner.invoke(
        app,
        ["--log-level", "WARNING", "plan", "100", "2025-01-16", "--today", "2025-01-06"],
    )
    assert result.exit_code == 0, result.output
    assert "Phases" in result.output
    assert "Início" in result.output
    assert "Today: 10 units" in result.output


def test_plan_exponential_with_exclusions():
    result = runner.invoke(
        app,
        [
            "--log-level", "WARNING",
            "plan", "137", "2025-01-20", "--today", "2025-01-06",
            "-x", "0", "-x", "6", "-d", "EXPONENTIAL", "-i", "0.7",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "10 effective days" in result.output


def test_plan_expired():
    result = runner.invoke(app, ["--log-level", "WARNING", "plan", "100", "2025-01-06", "--today", "2025-01-06"])
    assert result.exit_code == 1
    assert "Deadline reached" in result.output


def test_plan_all_days_excluded():
    result = runner.invoke(
        app,
        ["--log-level", "WARNING", "plan", "40", "2025-01-11", "--today", "2025-01-06"]
        + [arg for d in range(1, 6) for arg in ("-x", str(d))],
    )
    assert result.exit_code == 1
    assert "All days are excluded" in result.output


def test_plan_rejects_bad_weekday():
    result = runner.invoke(app, ["plan", "100", "2025-01-16", "--today", "2025-01-06", "-x", "8"])
    assert result.exit_code != 0


def test_requirement():
    result = runner.invoke(app, ["--log-level", "WARNING", "requirement", "300", "2025-01-16", "--today", "2025-01-06"])
    assert result.exit_code == 0, result.output
    assert "30 units/day over 10 days" in result.output


def test_session():
    result = runner.invoke(
        app, ["--log-level", "WARNING", "session", "MINUTES", "600", "0", "2025-01-11", "--today", "2025-01-06"]
    )
    assert result.exit_code == 0, result.output
    assert "5 pomodoros/day (2h/day) over 5 days" in result.output
