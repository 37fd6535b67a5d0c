"""Mini README: Flight plan computation and greedy refuel stop search.

Structure:
    * StopSearchResult - stops picked by the search and whether they suffice.
    * find_refuel_stops - greedy closest-to-destination stop selection.
    * RoutePlanner - validates a request and assembles the ``FlightPlan``.

The search is a local heuristic: from the current airport it hops to the
reachable, fuel-compatible airport that ends up nearest the destination and
never revisits a choice. Ties go to whichever airport appears first in the
pool. It can fail on routes a different stop order would complete.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from ..errors import InvalidInputError, UnreachableRouteError
from ..geometry import great_circle_distance, initial_heading
from ..logging_utils import get_logger
from ..models import Aircraft, Airport, FlightPlan, RouteLeg
from .fuel import is_fuel_compatible

if TYPE_CHECKING:
    from ..configuration import PlannerSettings

LOGGER = get_logger(__name__)

KNOTS_TO_MPH = 0.621371
CRUISE_EFFICIENCY = 0.85


@dataclass(frozen=True, slots=True)
class StopSearchResult:
    """Outcome of the greedy stop search."""

    stops: Tuple[Airport, ...]
    reached: bool
    last_airport: Airport


def find_refuel_stops(
    origin: Airport,
    destination: Airport,
    aircraft: Aircraft,
    pool: Sequence[Airport],
) -> StopSearchResult:
    """Pick refuel stops until ``destination`` is within range of the last one."""

    max_range = aircraft.max_range_miles
    stops: List[Airport] = []
    current = origin

    while great_circle_distance(current, destination) > max_range:
        best_stop: Optional[Airport] = None
        shortest_remaining = float("inf")

        for candidate in pool:
            if candidate == current or candidate == destination or candidate in stops:
                continue
            if great_circle_distance(current, candidate) > max_range:
                continue
            if not is_fuel_compatible(aircraft, candidate):
                continue
            remaining = great_circle_distance(candidate, destination)
            if remaining < shortest_remaining:
                best_stop = candidate
                shortest_remaining = remaining

        if best_stop is None:
            return StopSearchResult(stops=tuple(stops), reached=False, last_airport=current)

        LOGGER.debug(
            "Selected refuel stop %s (%.1f mi from %s)",
            best_stop.icao,
            shortest_remaining,
            destination.icao,
        )
        stops.append(best_stop)
        current = best_stop

    return StopSearchResult(stops=tuple(stops), reached=True, last_airport=current)


def _build_legs(route: Sequence[Airport]) -> Tuple[RouteLeg, ...]:
    return tuple(
        RouteLeg(
            origin_name=start.name,
            destination_name=end.name,
            distance_miles=great_circle_distance(start, end),
            heading_degrees=initial_heading(start, end),
            origin_icao=start.icao,
            destination_icao=end.icao,
        )
        for start, end in zip(route, route[1:])
    )


class RoutePlanner:
    """Plan single-aircraft flights between airports.

    ``strict`` decides what happens when the stop search stalls: raise
    ``UnreachableRouteError`` (default) or return the partial plan with
    ``complete=False``. Either way a warning is emitted on ``logger``.
    """

    def __init__(
        self,
        *,
        knots_to_mph: float = KNOTS_TO_MPH,
        cruise_efficiency: float = CRUISE_EFFICIENCY,
        strict: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not knots_to_mph > 0:
            raise ValueError("knots_to_mph must be positive")
        if not 0 < cruise_efficiency <= 1:
            raise ValueError("cruise_efficiency must be within (0, 1]")
        self.knots_to_mph = knots_to_mph
        self.cruise_efficiency = cruise_efficiency
        self.strict = strict
        self.logger = logger or LOGGER
        self.logger.debug(
            "Initialised RoutePlanner with knots_to_mph=%s cruise_efficiency=%s strict=%s",
            knots_to_mph,
            cruise_efficiency,
            strict,
        )

    @classmethod
    def from_settings(
        cls, settings: "PlannerSettings", *, logger: Optional[logging.Logger] = None
    ) -> "RoutePlanner":
        """Build a planner using the configured constants and routing policy."""

        return cls(
            knots_to_mph=settings.knots_to_mph,
            cruise_efficiency=settings.cruise_efficiency,
            strict=settings.strict_routing,
            logger=logger,
        )

    def effective_speed_mph(self, aircraft: Aircraft) -> float:
        """Cruise ground speed in miles per hour after the efficiency factor."""

        return aircraft.airspeed_knots * self.knots_to_mph * self.cruise_efficiency

    def plan(
        self,
        origin: Optional[Airport],
        destination: Optional[Airport],
        aircraft: Optional[Aircraft],
        pool: Optional[Iterable[Airport]],
    ) -> FlightPlan:
        """Compute the flight plan from ``origin`` to ``destination``."""

        if origin is None or destination is None or aircraft is None or pool is None:
            raise InvalidInputError("Invalid input data: Ensure all values are provided.")

        candidates = tuple(pool)
        distance = great_circle_distance(origin, destination)
        estimated_time = distance / self.effective_speed_mph(aircraft)
        fuel_required = estimated_time * aircraft.fuel_burn_rate
        heading = initial_heading(origin, destination)
        self.logger.info(
            "Planning %s -> %s: %.1f mi, heading %.1f, range %.1f mi",
            origin.icao,
            destination.icao,
            distance,
            heading,
            aircraft.max_range_miles,
        )

        stops: Tuple[Airport, ...] = ()
        complete = True
        if distance > aircraft.max_range_miles:
            result = find_refuel_stops(origin, destination, aircraft, candidates)
            stops = result.stops
            if not result.reached:
                complete = False
                stop_names = [stop.name for stop in stops]
                self.logger.warning(
                    "No valid refuel stop from %s (partial stops: %s)",
                    result.last_airport.name,
                    stop_names or "none",
                )
                if self.strict:
                    raise UnreachableRouteError(result.last_airport.name, stop_names)

        return FlightPlan(
            origin_name=origin.name,
            destination_name=destination.name,
            estimated_time_hours=estimated_time,
            distance_miles=distance,
            fuel_required=fuel_required,
            heading_degrees=heading,
            destination_frequency=destination.radio_frequency,
            refuel_stops=tuple(stop.name for stop in stops),
            legs=_build_legs((origin, *stops, destination)),
            complete=complete,
        )
