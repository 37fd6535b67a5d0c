"""Mini README: Route planning subsystem for airport-to-airport flights.

Exports the planner, the greedy stop search it delegates to, and the fuel
compatibility predicate. Alternative search strategies can be added beside
``find_refuel_stops`` without changing the ``RoutePlanner`` API.
"""

from .fuel import is_fuel_compatible
from .planner import (
    CRUISE_EFFICIENCY,
    KNOTS_TO_MPH,
    RoutePlanner,
    StopSearchResult,
    find_refuel_stops,
)

__all__ = [
    "CRUISE_EFFICIENCY",
    "KNOTS_TO_MPH",
    "RoutePlanner",
    "StopSearchResult",
    "find_refuel_stops",
    "is_fuel_compatible",
]
