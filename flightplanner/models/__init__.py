"""Mini README: Data records shared by the planner, catalogue and interfaces.

The records are deliberately plain: frozen dataclasses with no I/O, so they
can be built from any data source and shared safely between threads.
"""

from .records import (
    DEFAULT_FUEL_TYPES,
    Aircraft,
    Airport,
    FlightPlan,
    FuelType,
    GeoPoint,
    RouteLeg,
    airports_by_icao,
)

__all__ = [
    "Aircraft",
    "Airport",
    "DEFAULT_FUEL_TYPES",
    "FlightPlan",
    "FuelType",
    "GeoPoint",
    "RouteLeg",
    "airports_by_icao",
]
