"""Mini README: Airport catalogue package.

The ``catalogue`` module holds the in-memory registry that supplies origin,
destination and candidate refuel airports to the planner.
"""

from .catalogue import AirportCatalogue

__all__ = ["AirportCatalogue"]
