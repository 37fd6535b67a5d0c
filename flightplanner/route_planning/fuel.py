"""Mini README: Fuel compatibility predicate used by the stop search."""

from __future__ import annotations

from ..models import Aircraft, Airport


def is_fuel_compatible(aircraft: Aircraft, airport: Airport) -> bool:
    """Return ``True`` when ``airport`` sells the fuel ``aircraft`` burns.

    Selector 1 needs "Avgas", selector 2 needs "Jet A"; names are matched
    without regard to case. Unknown selectors are never compatible.
    """

    fuel_label = aircraft.fuel_label
    if fuel_label is None:
        return False
    return airport.offers_fuel(fuel_label)
