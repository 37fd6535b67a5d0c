"""Mini README: GeoJSON helper utilities for planned routes.

This module turns a ``FlightPlan`` into a GeoJSON LineString so map
front-ends can draw the route. Keeping the logic isolated avoids importing
web framework dependencies when running unit tests or reusing the helper in
other modules.
"""

from __future__ import annotations

from typing import Dict, Iterable

from ..models import Airport, FlightPlan, airports_by_icao


def route_to_geojson(plan: FlightPlan, airports: Iterable[Airport]) -> Dict:
    """Return a GeoJSON Feature tracing origin, refuel stops and destination.

    Airports are matched on the ICAO codes carried by the plan's legs, so
    airports sharing a display name still resolve to the right coordinates.
    ``airports`` must contain every airport on the route; coordinates are
    emitted in GeoJSON's longitude/latitude order.
    """

    codes = plan.route_icaos
    if not codes:
        raise ValueError("Plan has no legs to export")

    index = airports_by_icao(airports)
    coordinates = []
    for code in codes:
        airport = index.get(code.upper())
        if airport is None:
            raise ValueError(f"Airport {code} is missing from the supplied airports")
        coordinates.append([airport.longitude, airport.latitude])

    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": coordinates},
        "properties": {
            "origin": plan.origin_name,
            "destination": plan.destination_name,
            "refuel_stops": list(plan.refuel_stops),
            "distance_miles": plan.distance_miles,
            "complete": plan.complete,
        },
    }
