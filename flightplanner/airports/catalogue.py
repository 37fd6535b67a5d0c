"""Mini README: In-memory airport catalogue feeding the route planner.

Structure:
    * AirportCatalogue - keyed by ICAO code, hands out immutable snapshots.

The catalogue ships deterministic demo airports so the CLI and web service
work without external data. Callers with their own data build the catalogue
from any iterable of ``Airport`` records. ``snapshot`` returns a tuple, which
is what the planner should receive as its candidate pool when other threads
may register airports concurrently.
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Iterable, List, Optional, Tuple

from ..logging_utils import get_logger
from ..models import Airport, GeoPoint

LOGGER = get_logger(__name__)

JET_ONLY = frozenset({"Jet A"})


class AirportCatalogue:
    """Registry of airports available for planning."""

    def __init__(self, airports: Optional[Iterable[Airport]] = None) -> None:
        if airports is None:
            airports = self._build_demo_airports()
        self._lock = Lock()
        self._airports: Dict[str, Airport] = {}
        for airport in airports:
            self._airports[airport.icao.upper()] = airport
        LOGGER.debug("Initialised AirportCatalogue with %s airports", len(self._airports))

    @staticmethod
    def _build_demo_airports() -> List[Airport]:
        """Create deterministic demo airports spanning the continental US."""

        return [
            Airport(
                name="Seattle-Tacoma International",
                icao="KSEA",
                position=GeoPoint(47.4490, -122.3093),
                radio_frequency=119.9,
                city="Seattle",
                region_state="Washington",
                region_abbr="WA",
                fuel_types=JET_ONLY,
            ),
            Airport(
                name="Boise Air Terminal",
                icao="KBOI",
                position=GeoPoint(43.5644, -116.2228),
                radio_frequency=118.1,
                city="Boise",
                region_state="Idaho",
                region_abbr="ID",
            ),
            Airport(
                name="Salt Lake City International",
                icao="KSLC",
                position=GeoPoint(40.7884, -111.9778),
                radio_frequency=119.05,
                city="Salt Lake City",
                region_state="Utah",
                region_abbr="UT",
            ),
            Airport(
                name="Denver International",
                icao="KDEN",
                position=GeoPoint(39.8561, -104.6737),
                radio_frequency=133.3,
                city="Denver",
                region_state="Colorado",
                region_abbr="CO",
                fuel_types=JET_ONLY,
            ),
            Airport(
                name="Eppley Airfield",
                icao="KOMA",
                position=GeoPoint(41.3032, -95.8941),
                radio_frequency=127.65,
                city="Omaha",
                region_state="Nebraska",
                region_abbr="NE",
            ),
            Airport(
                name="Chicago O'Hare International",
                icao="KORD",
                position=GeoPoint(41.9786, -87.9048),
                radio_frequency=120.75,
                city="Chicago",
                region_state="Illinois",
                region_abbr="IL",
                fuel_types=JET_ONLY,
            ),
            Airport(
                name="Cleveland Hopkins International",
                icao="KCLE",
                position=GeoPoint(41.4117, -81.8498),
                radio_frequency=124.5,
                city="Cleveland",
                region_state="Ohio",
                region_abbr="OH",
            ),
            Airport(
                name="Boston Logan International",
                icao="KBOS",
                position=GeoPoint(42.3643, -71.0052),
                radio_frequency=128.8,
                city="Boston",
                region_state="Massachusetts",
                region_abbr="MA",
            ),
            Airport(
                name="John F. Kennedy International",
                icao="KJFK",
                position=GeoPoint(40.6398, -73.7789),
                radio_frequency=119.1,
                city="New York",
                region_state="New York",
                region_abbr="NY",
                fuel_types=JET_ONLY,
            ),
            Airport(
                name="Los Angeles International",
                icao="KLAX",
                position=GeoPoint(33.9425, -118.4081),
                radio_frequency=133.9,
                city="Los Angeles",
                region_state="California",
                region_abbr="CA",
                fuel_types=JET_ONLY,
            ),
            Airport(
                name="Phoenix Sky Harbor International",
                icao="KPHX",
                position=GeoPoint(33.4343, -112.0116),
                radio_frequency=118.7,
                city="Phoenix",
                region_state="Arizona",
                region_abbr="AZ",
            ),
            Airport(
                name="Dallas/Fort Worth International",
                icao="KDFW",
                position=GeoPoint(32.8968, -97.0380),
                radio_frequency=126.55,
                city="Dallas",
                region_state="Texas",
                region_abbr="TX",
                fuel_types=JET_ONLY,
            ),
            Airport(
                name="Hartsfield-Jackson Atlanta International",
                icao="KATL",
                position=GeoPoint(33.6367, -84.4281),
                radio_frequency=119.1,
                city="Atlanta",
                region_state="Georgia",
                region_abbr="GA",
            ),
        ]

    def __len__(self) -> int:
        return len(self._airports)

    def list_airports(self) -> List[Airport]:
        """Return airports ordered by ICAO code."""

        return sorted(self.snapshot(), key=lambda airport: airport.icao)

    def get_airport(self, icao: str) -> Airport:
        """Retrieve an airport, raising an informative error if not known."""

        key = icao.strip().upper()
        airport = self._airports.get(key)
        if airport is None:
            raise KeyError(f"Airport {icao} is not registered")
        return airport

    def register(self, airport: Airport) -> None:
        """Add or replace an airport under its ICAO code."""

        with self._lock:
            self._airports[airport.icao.upper()] = airport
        LOGGER.info("Registered airport %s (%s)", airport.icao, airport.name)

    def snapshot(self) -> Tuple[Airport, ...]:
        """Immutable view of the catalogue in registration order."""

        with self._lock:
            return tuple(self._airports.values())
