"""Mini README: Tests for environment-driven planner settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from flightplanner.configuration import PlannerSettings
from flightplanner.route_planning import CRUISE_EFFICIENCY, KNOTS_TO_MPH, RoutePlanner


def test_defaults_match_planner_constants() -> None:
    settings = PlannerSettings()

    assert settings.knots_to_mph == pytest.approx(KNOTS_TO_MPH)
    assert settings.cruise_efficiency == pytest.approx(CRUISE_EFFICIENCY)
    assert settings.strict_routing is True


def test_environment_overrides_build_lenient_planner(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHTPLANNER_CRUISE_EFFICIENCY", "0.9")
    monkeypatch.setenv("FLIGHTPLANNER_STRICT_ROUTING", "false")
    monkeypatch.setenv("FLIGHTPLANNER_LOG_LEVEL", "debug")

    settings = PlannerSettings()
    planner = RoutePlanner.from_settings(settings)

    assert settings.log_level == "DEBUG"
    assert planner.cruise_efficiency == pytest.approx(0.9)
    assert planner.strict is False


def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHTPLANNER_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        PlannerSettings()

    monkeypatch.delenv("FLIGHTPLANNER_LOG_LEVEL")
    monkeypatch.setenv("FLIGHTPLANNER_CRUISE_EFFICIENCY", "1.5")
    with pytest.raises(ValidationError):
        PlannerSettings()
