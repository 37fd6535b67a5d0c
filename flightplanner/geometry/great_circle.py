"""Mini README: Spherical geometry helpers for airport-to-airport legs.

Structure:
    * great_circle_distance - haversine distance in statute miles.
    * initial_heading - initial true bearing normalised into [0, 360).

Both functions are pure and accept anything exposing ``latitude`` and
``longitude`` in degrees (``GeoPoint`` or ``Airport``). Precision degrades
near antipodal points; the haversine term is clamped so such inputs still
return finite values.
"""

from __future__ import annotations

import math
from typing import Protocol

EARTH_RADIUS_MILES = 3959


class HasCoordinates(Protocol):
    latitude: float
    longitude: float


def great_circle_distance(
    a: HasCoordinates, b: HasCoordinates, radius: float = EARTH_RADIUS_MILES
) -> float:
    """Return the haversine distance between ``a`` and ``b``."""

    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    lon2 = math.radians(b.longitude)

    half_chord = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )
    half_chord = min(1.0, max(0.0, half_chord))
    angle = 2 * math.atan2(math.sqrt(half_chord), math.sqrt(1 - half_chord))
    return radius * angle


def initial_heading(a: HasCoordinates, b: HasCoordinates) -> float:
    """Return the initial bearing from ``a`` towards ``b`` in degrees."""

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    east = math.sin(delta_lon) * math.cos(lat2)
    north = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)
    heading = (math.degrees(math.atan2(east, north)) + 360) % 360
    # -0.0 + 360 can round to exactly 360.0 after the modulo.
    return 0.0 if heading >= 360 else heading
