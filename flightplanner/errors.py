"""Mini README: Exception hierarchy raised by the flight planner.

Structure:
    * FlightPlannerError - base class for every planner failure.
    * InvalidInputError - a required planning argument was missing.
    * UnreachableRouteError - the greedy stop search ran out of candidates.
"""

from __future__ import annotations

from typing import Sequence


class FlightPlannerError(Exception):
    """Base class for flight planner failures."""


class InvalidInputError(FlightPlannerError, ValueError):
    """Raised before any computation when a planning argument is absent."""


class UnreachableRouteError(FlightPlannerError):
    """Raised when no eligible refuel stop exists from ``last_airport``.

    The stops chosen before the search stalled are kept on ``partial_stops``
    so callers can still show how far the route got.
    """

    def __init__(self, last_airport: str, partial_stops: Sequence[str]) -> None:
        self.last_airport = last_airport
        self.partial_stops = tuple(partial_stops)
        super().__init__(f"No valid refuel stop from {last_airport}")
