"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

from typer.testing import CliRunner

from main_flight_planner import cli

runner = CliRunner()


def test_plan_command_prints_direct_summary() -> None:
    result = runner.invoke(
        cli,
        ["plan", "KSEA", "KBOI", "--airspeed", "150", "--burn-rate", "10", "--max-range", "1000"],
    )

    assert result.exit_code == 0
    assert "Seattle-Tacoma International -> Boise Air Terminal" in result.output
    assert "Refuel stops: none" in result.output


def test_plan_command_fails_for_unreachable_route() -> None:
    result = runner.invoke(
        cli,
        ["plan", "KSEA", "KBOS", "--airspeed", "150", "--burn-rate", "10", "--max-range", "50"],
    )

    assert result.exit_code == 1


def test_plan_command_lenient_mode_reports_incomplete_route() -> None:
    result = runner.invoke(
        cli,
        [
            "plan",
            "KSEA",
            "KBOS",
            "--airspeed",
            "150",
            "--burn-rate",
            "10",
            "--max-range",
            "50",
            "--lenient",
        ],
    )

    assert result.exit_code == 0
    assert "route incomplete" in result.output


def test_plan_command_rejects_unknown_airport() -> None:
    result = runner.invoke(
        cli,
        ["plan", "KSEA", "ZZZZ", "--airspeed", "150", "--burn-rate", "10", "--max-range", "1000"],
    )

    assert result.exit_code == 2


def test_airports_command_lists_catalogue() -> None:
    result = runner.invoke(cli, ["airports"])

    assert result.exit_code == 0
    assert "KSEA" in result.output


def test_plan_command_rejects_nan_range() -> None:
    result = runner.invoke(
        cli,
        ["plan", "KSEA", "KBOS", "--airspeed", "150", "--burn-rate", "10", "--max-range", "nan"],
    )

    assert result.exit_code == 2
    assert "Refuel stops" not in result.output
