"""Mini README: Plain records exchanged with the flight planner.

Structure:
    * GeoPoint - latitude/longitude pair in degrees.
    * FuelType - enum of the aircraft fuel selectors the planner understands.
    * Airport - immutable airport record with a stored set of fuel types.
    * Aircraft - performance figures used for time, fuel and range checks.
    * RouteLeg - one hop of a planned route.
    * FlightPlan - value snapshot returned by ``RoutePlanner.plan``.

Coordinates are assumed to lie within -90..90 and -180..180; nothing here
validates them. Airports compare by value, which is what the stop search
relies on when it skips airports already on the route.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

DEFAULT_FUEL_TYPES: Tuple[str, ...] = ("Jet A", "100LL", "Avgas")


class FuelType(IntEnum):
    """Fuel selector values carried by aircraft records."""

    AVGAS = 1
    JET_A = 2

    @property
    def label(self) -> str:
        """Fuel name as airports advertise it."""

        return FUEL_TYPE_LABELS[self]


FUEL_TYPE_LABELS: Dict[FuelType, str] = {
    FuelType.AVGAS: "Avgas",
    FuelType.JET_A: "Jet A",
}


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """Geographic position in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Airport:
    """Airport metadata used for routing and frequency lookups."""

    name: str
    icao: str
    position: GeoPoint
    radio_frequency: float
    city: str = ""
    region_state: str = ""
    region_abbr: str = ""
    fuel_types: FrozenSet[str] = field(default_factory=lambda: frozenset(DEFAULT_FUEL_TYPES))

    def __post_init__(self) -> None:
        # Accept any iterable of names while keeping the record hashable.
        object.__setattr__(self, "fuel_types", frozenset(self.fuel_types))

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude

    def offers_fuel(self, fuel_name: str) -> bool:
        """Case-insensitive check against the stored fuel types."""

        wanted = fuel_name.casefold()
        return any(offered.casefold() == wanted for offered in self.fuel_types)

    def as_dict(self) -> Dict[str, object]:
        """Export the airport with serialisable values."""

        return {
            "name": self.name,
            "icao": self.icao,
            "city": self.city,
            "region_state": self.region_state,
            "region_abbr": self.region_abbr,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radio_frequency": self.radio_frequency,
            "fuel_types": sorted(self.fuel_types),
        }


@dataclass(frozen=True, slots=True)
class Aircraft:
    """Aircraft performance figures.

    ``airspeed_knots`` is converted to miles per hour by the planner,
    ``fuel_burn_rate`` is fuel per hour and ``max_range_miles`` uses the same
    statute-mile unit as the distance function. ``fuel_type`` is a selector:
    1 for Avgas, 2 for Jet A. Other selector values are accepted but never
    match an airport.
    """

    airspeed_knots: float
    fuel_burn_rate: float
    max_range_miles: float
    fuel_type: int = FuelType.AVGAS

    def __post_init__(self) -> None:
        for attribute in ("airspeed_knots", "fuel_burn_rate", "max_range_miles"):
            value = getattr(self, attribute)
            # NaN fails every comparison, so test for the positive case.
            if not (value > 0 and math.isfinite(value)):
                raise ValueError(f"{attribute} must be a positive finite number")

    @property
    def fuel_label(self) -> Optional[str]:
        """Fuel name required at refuel stops, ``None`` for unknown selectors."""

        try:
            return FuelType(self.fuel_type).label
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """Single hop between two airports on the planned route."""

    origin_name: str
    destination_name: str
    distance_miles: float
    heading_degrees: float
    origin_icao: str = ""
    destination_icao: str = ""

    def as_dict(self) -> Dict[str, object]:
        return {
            "origin": self.origin_name,
            "destination": self.destination_name,
            "origin_icao": self.origin_icao,
            "destination_icao": self.destination_icao,
            "distance_miles": self.distance_miles,
            "heading_degrees": self.heading_degrees,
        }


@dataclass(frozen=True, slots=True)
class FlightPlan:
    """Computed plan for one origin/destination pair.

    Time and fuel always describe the direct leg, even when refuel stops are
    listed. ``complete`` is ``False`` when the stop search gave up before the
    destination came within range.
    """

    origin_name: str
    destination_name: str
    estimated_time_hours: float
    distance_miles: float
    fuel_required: float
    heading_degrees: float
    destination_frequency: float
    refuel_stops: Tuple[str, ...] = ()
    legs: Tuple[RouteLeg, ...] = ()
    complete: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "refuel_stops", tuple(self.refuel_stops))
        object.__setattr__(self, "legs", tuple(self.legs))

    @property
    def requires_refuelling(self) -> bool:
        return bool(self.refuel_stops)

    @property
    def route_names(self) -> Tuple[str, ...]:
        """Origin, every stop, and the destination in flying order."""

        return (self.origin_name, *self.refuel_stops, self.destination_name)

    @property
    def route_icaos(self) -> Tuple[str, ...]:
        """ICAO codes along the route, empty when the plan carries no legs."""

        if not self.legs:
            return ()
        return (self.legs[0].origin_icao, *(leg.destination_icao for leg in self.legs))

    def as_dict(self) -> Dict[str, object]:
        """Export the plan with serialisable values."""

        return {
            "origin": self.origin_name,
            "destination": self.destination_name,
            "estimated_time_hours": self.estimated_time_hours,
            "distance_miles": self.distance_miles,
            "fuel_required": self.fuel_required,
            "heading_degrees": self.heading_degrees,
            "destination_frequency": self.destination_frequency,
            "refuel_stops": list(self.refuel_stops),
            "legs": [leg.as_dict() for leg in self.legs],
            "complete": self.complete,
        }


def airports_by_icao(airports: Iterable[Airport]) -> Dict[str, Airport]:
    """Index airports by upper-cased ICAO code, first occurrence wins."""

    index: Dict[str, Airport] = {}
    for airport in airports:
        index.setdefault(airport.icao.upper(), airport)
    return index
