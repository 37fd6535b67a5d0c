"""Mini README: Tests for the FastAPI planning service.

Exercises the airport listing and the plan endpoint for direct flights,
multi-stop routes, unknown airports and unreachable routes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from flightplanner.airports import AirportCatalogue
from flightplanner.interface import create_application
from flightplanner.models import Airport, GeoPoint
from flightplanner.route_planning import RoutePlanner


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_application(catalogue=AirportCatalogue(), planner=RoutePlanner()))


def _request(origin: str, destination: str, max_range: float, fuel_type: int = 2) -> dict:
    return {
        "origin": origin,
        "destination": destination,
        "aircraft": {
            "airspeed_knots": 450.0,
            "fuel_burn_rate": 300.0,
            "max_range_miles": max_range,
            "fuel_type": fuel_type,
        },
    }


def test_list_airports(client: TestClient) -> None:
    response = client.get("/airports")

    assert response.status_code == 200
    codes = [airport["icao"] for airport in response.json()["airports"]]
    assert "KDEN" in codes


def test_direct_plan_returns_route_geojson(client: TestClient) -> None:
    response = client.post("/plan-flight", json=_request("KSEA", "KBOI", 1000.0))

    assert response.status_code == 200
    payload = response.json()
    assert payload["plan"]["refuel_stops"] == []
    assert payload["plan"]["destination_frequency"] == pytest.approx(118.1)
    assert len(payload["route"]["geometry"]["coordinates"]) == 2


def test_cross_country_plan_adds_stops_within_range(client: TestClient) -> None:
    response = client.post("/plan-flight", json=_request("KSEA", "KBOS", 1000.0))

    assert response.status_code == 200
    plan = response.json()["plan"]
    assert plan["refuel_stops"]
    assert plan["complete"] is True
    assert all(leg["distance_miles"] <= 1000.0 for leg in plan["legs"])


def test_unknown_airport_returns_404(client: TestClient) -> None:
    response = client.post("/plan-flight", json=_request("KSEA", "ZZZZ", 1000.0))

    assert response.status_code == 404


def test_invalid_aircraft_is_rejected(client: TestClient) -> None:
    response = client.post("/plan-flight", json=_request("KSEA", "KBOI", -5.0))

    assert response.status_code == 422


def test_unreachable_route_returns_conflict(client: TestClient) -> None:
    response = client.post("/plan-flight", json=_request("KSEA", "KBOS", 100.0))

    assert response.status_code == 409
    assert response.json()["detail"]["partial_stops"] == []


def test_injected_empty_catalogue_is_kept() -> None:
    catalogue = AirportCatalogue(airports=[])
    client = TestClient(create_application(catalogue=catalogue, planner=RoutePlanner()))

    assert client.get("/airports").json()["airports"] == []

    catalogue.register(
        Airport(name="Late Field", icao="KLTE", position=GeoPoint(1.0, 1.0), radio_frequency=122.7)
    )
    codes = [airport["icao"] for airport in client.get("/airports").json()["airports"]]
    assert codes == ["KLTE"]


@pytest.mark.parametrize("field", ["airspeed_knots", "fuel_burn_rate", "max_range_miles"])
def test_zero_aircraft_figures_are_rejected_by_validation(client: TestClient, field: str) -> None:
    body = _request("KSEA", "KBOI", 1000.0)
    body["aircraft"][field] = 0.0

    response = client.post("/plan-flight", json=body)

    assert response.status_code == 422
